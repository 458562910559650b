"""Biquad design returning coefficient tensors."""

from __future__ import annotations

import warnings
from typing import Optional

import torch
from torch import Tensor

from .._precision import REAL_PRECISION, torch_dtype
from ._biquad_coefficients import BiquadType, _design


def biquad_design(
    filter_type: BiquadType,
    f0: float,
    q: float,
    gain: float = 1.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> tuple[Tensor, Tensor]:
    """
    Design a biquad of the given type and return its coefficients as tensors.

    The coefficients are computed at the configured real precision and then
    stored in tensors.

    Parameters
    ----------
    filter_type : str
        Biquad type, see :func:`biquad_coefficients`.
    f0 : float
        Cutoff or center frequency, normalized so that 1 is the Nyquist
        frequency.
    q : float
        Quality factor.
    gain : float, optional
        Linear gain. Default is 1.
    dtype : torch.dtype, optional
        Output dtype. Defaults to the dtype matching the configured real
        precision (``float64`` for extended precision).
    device : torch.device, optional
        Output device. Defaults to CPU.

    Returns
    -------
    b : Tensor
        Feedforward coefficients ``(b0, b1, b2)``, shape (3,).
    a : Tensor
        Feedback coefficients ``(a1, a2)``, shape (2,). ``a0`` is 1 and not
        included.

    Examples
    --------
    >>> from torchrta.filter_design import biquad_design
    >>> b, a = biquad_design("lowpass", 0.5, 0.70710678)
    >>> b.shape, a.shape
    (torch.Size([3]), torch.Size([2]))
    """
    if dtype is None:
        dtype = torch_dtype()
        if REAL_PRECISION == "extended":
            warnings.warn(
                "torch has no extended-precision dtype; biquad coefficients "
                "are rounded to float64.",
                RuntimeWarning,
                stacklevel=2,
            )
    if device is None:
        device = torch.device("cpu")

    coefficients = _design(filter_type, f0, q, gain, None)

    b = torch.tensor(
        [float(value) for value in coefficients.b], dtype=dtype, device=device
    )
    a = torch.tensor(
        [float(value) for value in coefficients.a], dtype=dtype, device=device
    )

    return b, a
