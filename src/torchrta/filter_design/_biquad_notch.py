"""Second-order notch biquad design."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .._precision import Precision
from ._cookbook import BiquadCoefficients, _derived_quantities, _scalar


@np.errstate(all="ignore")
def biquad_notch(
    f0: float,
    q: float,
    *,
    precision: Optional[Precision] = None,
) -> BiquadCoefficients:
    """
    Design a second-order notch (band-reject) filter.

    Bilinear transform of ``H(s) = (s^2 + 1) / (s^2 + s/Q + 1)``.

    Parameters
    ----------
    f0 : float
        Notch frequency, normalized so that 1 is the Nyquist frequency.
    q : float
        Quality factor. Higher ``q`` narrows the rejected band.
    precision : {"single", "double", "extended"}, optional
        Working precision. Defaults to the configured real precision.

    Returns
    -------
    coefficients : BiquadCoefficients
        ``(b0, b1, b2, a1, a2)`` normalized by ``a0``.

    Notes
    -----
    The numerator has no odd term, so ``b1`` is exactly zero and the zeros
    sit at ``z = +-j``, a quarter of the sampling rate. Rejection is
    complete when ``f0 = 0.5``; away from it the poles still follow ``f0``
    and ``q`` but the zeros do not.
    """
    _, c, alpha = _derived_quantities(f0, q, precision)

    a0_inv = 1.0 / (1.0 + alpha)

    return BiquadCoefficients(
        b0=a0_inv,
        b1=_scalar(0.0, precision),
        b2=a0_inv,
        a1=(-2.0 * c) * a0_inv,
        a2=(1.0 - alpha) * a0_inv,
    )
