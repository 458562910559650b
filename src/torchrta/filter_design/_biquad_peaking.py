"""Second-order peaking EQ biquad design."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .._precision import Precision
from ._cookbook import BiquadCoefficients, _derived_quantities, _scalar


@np.errstate(all="ignore")
def biquad_peaking(
    f0: float,
    q: float,
    gain: float,
    *,
    precision: Optional[Precision] = None,
) -> BiquadCoefficients:
    """
    Design a second-order peaking equalizer.

    Bilinear transform of

        H(s) = (s^2 + s*(A/Q) + 1) / (s^2 + s/(A*Q) + 1)

    with ``A = sqrt(gain)``.

    Parameters
    ----------
    f0 : float
        Center frequency, normalized so that 1 is the Nyquist frequency.
    q : float
        Quality factor.
    gain : float
        Linear gain at ``f0``. Must be positive; ``gain = 1`` is flat. For a
        gain in decibels use ``10 ** (gain_db / 20)``.
    precision : {"single", "double", "extended"}, optional
        Working precision. Defaults to the configured real precision.

    Returns
    -------
    coefficients : BiquadCoefficients
        ``(b0, b1, b2, a1, a2)`` normalized by ``a0``.

    Examples
    --------
    >>> from torchrta.filter_design import biquad_peaking
    >>> boost = biquad_peaking(0.1, 2.0, 10 ** (6.0 / 20))
    """
    g = np.sqrt(_scalar(gain, precision))
    g_inv = 1.0 / g

    _, c, alpha = _derived_quantities(f0, q, precision)

    a0_inv = 1.0 / (1.0 + alpha * g_inv)

    a1 = (-2.0 * c) * a0_inv

    return BiquadCoefficients(
        b0=(1.0 + alpha * g) * a0_inv,
        b1=a1,
        b2=(1.0 - alpha * g) * a0_inv,
        a1=a1,
        a2=(1.0 - alpha * g_inv) * a0_inv,
    )
