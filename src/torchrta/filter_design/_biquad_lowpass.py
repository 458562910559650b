"""Second-order lowpass biquad design."""

from __future__ import annotations

from typing import Optional

import numpy as np

from .._precision import Precision
from ._cookbook import BiquadCoefficients, _derived_quantities


@np.errstate(all="ignore")
def biquad_lowpass(
    f0: float,
    q: float,
    *,
    precision: Optional[Precision] = None,
) -> BiquadCoefficients:
    """
    Design a second-order lowpass filter.

    Bilinear transform of the analog prototype

        H(s) = 1 / (s^2 + s/Q + 1)

    Parameters
    ----------
    f0 : float
        Cutoff frequency, normalized so that 1 is the Nyquist frequency.
    q : float
        Quality factor. ``Q_BUTTERWORTH`` gives a maximally flat passband.
    precision : {"single", "double", "extended"}, optional
        Working precision. Defaults to the configured real precision.

    Returns
    -------
    coefficients : BiquadCoefficients
        ``(b0, b1, b2, a1, a2)`` normalized by ``a0``.

    Notes
    -----
    No argument checking is done. ``q <= 0`` or ``f0`` outside ``(0, 1)``
    give infinite, NaN or unstable coefficients.

    Examples
    --------
    >>> from torchrta.filter_design import biquad_lowpass, Q_BUTTERWORTH
    >>> coefficients = biquad_lowpass(0.5, Q_BUTTERWORTH, precision="double")
    >>> round(float(coefficients.b0), 5)
    0.29289
    """
    _, c, alpha = _derived_quantities(f0, q, precision)

    a0_inv = 1.0 / (1.0 + alpha)

    b0 = ((1.0 - c) * 0.5) * a0_inv

    return BiquadCoefficients(
        b0=b0,
        b1=(1.0 - c) * a0_inv,
        b2=b0,
        a1=(-2.0 * c) * a0_inv,
        a2=(1.0 - alpha) * a0_inv,
    )
