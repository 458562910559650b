"""Second-order high shelf biquad design."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .._precision import Precision
from ._cookbook import BiquadCoefficients, _derived_quantities, _scalar


@np.errstate(all="ignore")
def biquad_highshelf(
    f0: float,
    q: float,
    gain: float,
    *,
    precision: Optional[Precision] = None,
) -> BiquadCoefficients:
    """
    Design a second-order high shelf filter.

    Bilinear transform of

        H(s) = A * (A*s^2 + (sqrt(A)/Q)*s + 1) / (s^2 + (sqrt(A)/Q)*s + A)

    with ``A = sqrt(gain)``.

    Parameters
    ----------
    f0 : float
        Corner frequency, normalized so that 1 is the Nyquist frequency.
    q : float
        Shelf slope control.
    gain : float
        Linear shelf gain applied above ``f0``. Must be positive.
    precision : {"single", "double", "extended"}, optional
        Working precision. Defaults to the configured real precision.

    Returns
    -------
    coefficients : BiquadCoefficients
    """
    g = np.sqrt(_scalar(gain, precision))

    s, c, _ = _derived_quantities(f0, q, precision)
    beta = s * np.sqrt(g) / _scalar(q, precision)

    a0_inv = 1.0 / ((g + 1.0) - (g - 1.0) * c + beta)

    return BiquadCoefficients(
        b0=(g * ((g + 1.0) + (g - 1.0) * c + beta)) * a0_inv,
        b1=(-2.0 * g * ((g - 1.0) + (g + 1.0) * c)) * a0_inv,
        b2=(g * ((g + 1.0) + (g - 1.0) * c - beta)) * a0_inv,
        a1=(2.0 * ((g - 1.0) - (g + 1.0) * c)) * a0_inv,
        a2=((g + 1.0) - (g - 1.0) * c - beta) * a0_inv,
    )
