"""Biquad filtering with the direct form I difference equation."""

from __future__ import annotations

import math
from typing import Optional, Sequence, Union

import torch
from torch import Tensor


def biquad_filter(
    b: Union[Tensor, Sequence[float]],
    a: Union[Tensor, Sequence[float]],
    x: Tensor,
    zi: Optional[Tensor] = None,
) -> Union[Tensor, tuple[Tensor, Tensor]]:
    """
    Filter a signal along its last dimension with a normalized biquad.

    Parameters
    ----------
    b : Tensor or sequence of float
        Feedforward coefficients ``(b0, b1, b2)``.
    a : Tensor or sequence of float
        Feedback coefficients ``(a1, a2)``; ``a0`` is taken to be 1.
    x : Tensor
        Input signal, shape ``(..., n_samples)``.
    zi : Tensor, optional
        Filter state ``(x[n-1], x[n-2], y[n-1], y[n-2])`` before the first
        sample, shape ``(..., 4)`` matching the batch dimensions of ``x``.
        If provided, returns ``(y, zf)`` where ``zf`` is the state after the
        last sample, so that a stream can be filtered block by block.

    Returns
    -------
    y : Tensor
        Filtered signal, same shape as ``x``.
    zf : Tensor, optional
        Final filter state (only if ``zi`` was provided).

    Notes
    -----
    Implements

    .. math::
        y[n] = b_0 x[n] + b_1 x[n-1] + b_2 x[n-2] - a_1 y[n-1] - a_2 y[n-2]

    Coefficients are read once per call; redesign and call again to change
    them between blocks.

    Examples
    --------
    >>> import torch
    >>> from torchrta.filter import biquad_filter
    >>> from torchrta.filter_design import biquad_design
    >>> b, a = biquad_design("lowpass", 0.1, 0.707)
    >>> x = torch.randn(2, 256, dtype=b.dtype)
    >>> y = biquad_filter(b, a, x)
    """
    if not isinstance(b, Tensor):
        b = torch.tensor([float(value) for value in b], dtype=x.dtype)
    if not isinstance(a, Tensor):
        a = torch.tensor([float(value) for value in a], dtype=x.dtype)

    if b.shape != (3,):
        raise ValueError(f"b must have shape (3,), got {tuple(b.shape)}")
    if a.shape != (2,):
        raise ValueError(f"a must have shape (2,), got {tuple(a.shape)}")

    out_dtype = torch.promote_types(
        torch.promote_types(b.dtype, a.dtype), x.dtype
    )
    b = b.to(dtype=out_dtype, device=x.device)
    a = a.to(dtype=out_dtype, device=x.device)

    batch_shape = x.shape[:-1]
    n_samples = x.shape[-1]
    x_flat = x.reshape(math.prod(batch_shape), n_samples).to(out_dtype)

    if zi is not None:
        if zi.shape != batch_shape + (4,):
            raise ValueError(
                f"zi must have shape {tuple(batch_shape + (4,))}, "
                f"got {tuple(zi.shape)}"
            )
        state = zi.reshape(-1, 4).to(dtype=out_dtype, device=x.device)
        x1, x2, y1, y2 = state.unbind(-1)
    else:
        x1 = x2 = y1 = y2 = torch.zeros(
            x_flat.shape[0], dtype=out_dtype, device=x.device
        )

    outputs = []
    for n in range(n_samples):
        x0 = x_flat[:, n]
        y0 = b[0] * x0 + b[1] * x1 + b[2] * x2 - a[0] * y1 - a[1] * y2
        outputs.append(y0)
        x2, x1 = x1, x0
        y2, y1 = y1, y0

    if outputs:
        y = torch.stack(outputs, dim=-1)
    else:
        y = torch.empty_like(x_flat)
    y = y.reshape(x.shape)

    if zi is not None:
        zf = torch.stack([x1, x2, y1, y2], dim=-1)
        return y, zf.reshape(batch_shape + (4,))

    return y
