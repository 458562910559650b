"""Frequency response of a normalized biquad."""

import math
from typing import Optional, Sequence, Tuple, Union

import torch
from torch import Tensor


def biquad_frequency_response(
    b: Union[Tensor, Sequence[float]],
    a: Union[Tensor, Sequence[float]],
    frequencies: Union[Tensor, int] = 512,
    whole: bool = False,
    sampling_frequency: Optional[float] = None,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[torch.device] = None,
) -> Tuple[Tensor, Tensor]:
    """
    Compute the frequency response of a normalized biquad.

    Parameters
    ----------
    b : Tensor or sequence of float
        Feedforward coefficients ``(b0, b1, b2)``.
    a : Tensor or sequence of float
        Feedback coefficients ``(a1, a2)``; ``a0`` is taken to be 1.
    frequencies : Tensor or int, default 512
        If int: Number of frequency points to compute.
        If Tensor: Specific frequency points at which to evaluate.
    whole : bool, default False
        If True and frequencies is int, compute from 0 to sampling frequency.
    sampling_frequency : float, optional
        If None: frequencies are normalized [0, 1] where 1 = Nyquist.
        If provided: frequencies are in Hz.
    dtype : torch.dtype, optional
        Output dtype for frequency response.
    device : torch.device, optional
        Output device.

    Returns
    -------
    frequencies : Tensor
        Frequency points.
    response : Tensor
        Complex frequency response H(e^{jw}).

    Notes
    -----
    .. math::
        H(e^{j\\omega}) = \\frac{b_0 + b_1 e^{-j\\omega} + b_2 e^{-2j\\omega}}
                               {1 + a_1 e^{-j\\omega} + a_2 e^{-2j\\omega}}

    Examples
    --------
    >>> from torchrta.filter_design import biquad_design
    >>> from torchrta.filter_analysis import biquad_frequency_response
    >>> b, a = biquad_design("allpass", 0.25, 2.0)
    >>> freqs, response = biquad_frequency_response(b, a)
    """
    # Python floats are double precision
    if not isinstance(b, Tensor):
        b = torch.tensor([float(value) for value in b], dtype=torch.float64)
    if not isinstance(a, Tensor):
        a = torch.tensor([float(value) for value in a], dtype=torch.float64)

    if b.shape != (3,):
        raise ValueError(f"b must have shape (3,), got {tuple(b.shape)}")
    if a.shape != (2,):
        raise ValueError(f"a must have shape (2,), got {tuple(a.shape)}")

    real_dtype = b.dtype if b.is_floating_point() else torch.float64

    if device is None:
        device = b.device
    if dtype is None:
        if real_dtype == torch.float64:
            dtype = torch.complex128
        else:
            dtype = torch.complex64

    if isinstance(frequencies, int):
        n_points = frequencies
        if whole:
            max_freq = (
                2.0 if sampling_frequency is None else sampling_frequency
            )
        else:
            max_freq = (
                1.0 if sampling_frequency is None else sampling_frequency / 2.0
            )

        # endpoint=False, as scipy.signal.freqz
        freq_points = torch.linspace(
            0, max_freq, n_points + 1, dtype=torch.float64, device=device
        )[:-1]
    else:
        freq_points = frequencies.to(dtype=torch.float64, device=device)

    if sampling_frequency is not None:
        w = 2 * math.pi * freq_points / sampling_frequency
    else:
        w = math.pi * freq_points

    z_inv = torch.exp(-1j * w)

    b = b.to(dtype=torch.complex128, device=device)
    a = a.to(dtype=torch.complex128, device=device)

    # Horner in z^-1
    num = (b[2] * z_inv + b[1]) * z_inv + b[0]
    den = (a[1] * z_inv + a[0]) * z_inv + 1.0

    response = num / den

    return freq_points.to(real_dtype), response.to(dtype)
