"""Biquad response at a single frequency, in scalar complex arithmetic."""

from __future__ import annotations

from typing import Optional, Sequence

from .._precision import Precision
from ..complex import Complex, add, divide, exp, make_complex, multiply


def biquad_response(
    b: Sequence[float],
    a: Sequence[float],
    w: float,
    *,
    precision: Optional[Precision] = None,
) -> Complex:
    """
    Evaluate a normalized biquad at one angular frequency.

    Parameters
    ----------
    b : sequence of float
        Feedforward coefficients ``(b0, b1, b2)``.
    a : sequence of float
        Feedback coefficients ``(a1, a2)``; ``a0`` is taken to be 1.
    w : float
        Angular frequency in radians per sample, ``pi`` being Nyquist.
    precision : {"single", "double", "extended"}, optional
        Working precision. Defaults to the configured complex precision.

    Returns
    -------
    response : Complex
        ``H(e^{jw})``.

    Examples
    --------
    >>> import math
    >>> from torchrta.complex import absolute
    >>> from torchrta.filter_design import biquad_allpass
    >>> coefficients = biquad_allpass(0.3, 0.8)
    >>> h = biquad_response(coefficients.b, coefficients.a, math.pi / 3)
    >>> round(float(absolute(h)), 6)
    1.0
    """
    z_inv = exp(make_complex(0.0, -w, precision=precision))
    num = _polyval_ascending((b[0], b[1], b[2]), z_inv)
    den = _polyval_ascending((1.0, a[0], a[1]), z_inv)

    return divide(num, den)


def _polyval_ascending(coeffs: Sequence[float], x: Complex) -> Complex:
    """Evaluate ``c0 + c1*x + c2*x^2 + ...`` by Horner's method."""
    cls = type(x)
    result = cls(0.0)
    for c in reversed(coeffs):
        result = add(multiply(result, x), cls(c))

    return result
