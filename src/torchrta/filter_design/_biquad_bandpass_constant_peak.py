"""Second-order bandpass biquad design, constant 0 dB peak gain."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .._precision import Precision
from ._cookbook import BiquadCoefficients, _derived_quantities, _scalar


@np.errstate(all="ignore")
def biquad_bandpass_constant_peak(
    f0: float,
    q: float,
    *,
    precision: Optional[Precision] = None,
) -> BiquadCoefficients:
    """
    Design a second-order bandpass filter with a 0 dB peak.

    Bilinear transform of ``H(s) = (s/Q) / (s^2 + s/Q + 1)``.

    Parameters
    ----------
    f0 : float
        Center frequency, normalized so that 1 is the Nyquist frequency.
    q : float
        Quality factor. Higher ``q`` narrows the passband.
    precision : {"single", "double", "extended"}, optional
        Working precision. Defaults to the configured real precision.

    Returns
    -------
    coefficients : BiquadCoefficients
        ``(b0, b1, b2, a1, a2)`` normalized by ``a0``.
    """
    _, c, alpha = _derived_quantities(f0, q, precision)

    a0_inv = 1.0 / (1.0 + alpha)

    b0 = alpha * a0_inv

    return BiquadCoefficients(
        b0=b0,
        b1=_scalar(0.0, precision),
        b2=-b0,
        a1=(-2.0 * c) * a0_inv,
        a2=(1.0 - alpha) * a0_inv,
    )
