"""Second-order allpass biquad design."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .._precision import Precision
from ._cookbook import BiquadCoefficients, _derived_quantities


@np.errstate(all="ignore")
def biquad_allpass(
    f0: float,
    q: float,
    *,
    precision: Optional[Precision] = None,
) -> BiquadCoefficients:
    """
    Design a second-order allpass filter.

    Bilinear transform of ``H(s) = (s^2 - s/Q + 1) / (s^2 + s/Q + 1)``. The
    magnitude response is 1 at every frequency; the phase turns through
    ``-pi`` at ``f0``.

    Parameters
    ----------
    f0 : float
        Center frequency of the phase transition, normalized so that 1 is the
        Nyquist frequency.
    q : float
        Quality factor. Higher ``q`` makes the phase transition steeper.
    precision : {"single", "double", "extended"}, optional
        Working precision. Defaults to the configured real precision.

    Returns
    -------
    coefficients : BiquadCoefficients
        ``(b0, b1, b2, a1, a2)`` normalized by ``a0``. The numerator is the
        mirror image of the denominator: ``b0 = a2``, ``b1 = a1`` and
        ``b2 = 1``.
    """
    _, c, alpha = _derived_quantities(f0, q, precision)

    a0_inv = 1.0 / (1.0 + alpha)

    a1 = (-2.0 * c) * a0_inv
    a2 = (1.0 - alpha) * a0_inv

    return BiquadCoefficients(
        b0=a2,
        b1=a1,
        b2=(1.0 + alpha) * a0_inv,
        a1=a1,
        a2=a2,
    )
