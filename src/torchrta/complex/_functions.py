"""Transcendental functions of :class:`Complex` values.

Each function hands the value to the native NumPy complex scalar of the same
precision, so the matching ``complex64``, ``complex128`` or ``clongdouble``
loop is the one that runs. Floating-point warnings are suppressed; special
values propagate.
"""

from __future__ import annotations

import numpy as np

from .._precision import real_type
from ._complex import Complex, _coerce


def _unary(ufunc):
    def function(z: Complex) -> Complex:
        with np.errstate(all="ignore"):
            return type(z).from_numpy(ufunc(z.to_numpy()))

    function.__name__ = ufunc.__name__
    function.__doc__ = f"Complex ``{ufunc.__name__}`` of ``z``."
    return function


exp = _unary(np.exp)
log = _unary(np.log)
sqrt = _unary(np.sqrt)

sin = _unary(np.sin)
cos = _unary(np.cos)
tan = _unary(np.tan)
arcsin = _unary(np.arcsin)
arccos = _unary(np.arccos)
arctan = _unary(np.arctan)

sinh = _unary(np.sinh)
cosh = _unary(np.cosh)
tanh = _unary(np.tanh)
arcsinh = _unary(np.arcsinh)
arccosh = _unary(np.arccosh)
arctanh = _unary(np.arctanh)


def absolute(z: Complex) -> np.floating:
    """Modulus ``|z|`` at the precision of ``z``."""
    with np.errstate(all="ignore"):
        return real_type(z.precision)(np.abs(z.to_numpy()))


def angle(z: Complex) -> np.floating:
    """Argument of ``z`` in radians, in ``[-pi, pi]``."""
    return real_type(z.precision)(np.arctan2(z.imag, z.real))


def power(z: Complex, exponent) -> Complex:
    """Principal value of ``z ** exponent``.

    ``exponent`` may be a :class:`Complex` or a real or complex number; it is
    taken at the precision of ``z``.
    """
    exponent = _coerce(exponent, type(z))
    with np.errstate(all="ignore"):
        return type(z).from_numpy(
            np.power(z.to_numpy(), exponent.to_numpy())
        )


def projection(z: Complex) -> Complex:
    """Projection of ``z`` onto the Riemann sphere.

    Values with an infinite component map to ``(inf, +-0)``, keeping the sign
    of the imaginary part; every other value is returned unchanged.
    """
    if np.isinf(z.real) or np.isinf(z.imag):
        return type(z)(np.inf, np.copysign(0.0, z.imag))
    return z
