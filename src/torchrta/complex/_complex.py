"""Complex value type at a fixed floating-point precision."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import ClassVar, Optional, Union

import numpy as np

from .._precision import (
    COMPLEX_PRECISION,
    Precision,
    complex_scalar_type,
    real_type,
)

Real = Union[float, np.floating]


@dataclass(frozen=True)
class Complex:
    """Immutable complex number with components at a fixed precision.

    ``Complex`` is generic over the precision. Values are instances of one of
    its precision-bound subclasses (:class:`ComplexSingle`,
    :class:`ComplexDouble`, :class:`ComplexExtended`); use
    :func:`make_complex` or :func:`complex_type` to obtain them.

    Parameters
    ----------
    real : float
        Real component, converted to the precision's NumPy scalar type.
    imag : float, optional
        Imaginary component. Default is 0.

    Notes
    -----
    Arithmetic is written out component-wise rather than delegated to the
    native NumPy complex type, so division by zero follows the plain IEEE
    semantics of the formulas (no scaling, no guard). The native type is
    reachable through :meth:`to_numpy` and :meth:`from_numpy`, and the
    transcendental functions in :mod:`torchrta.complex` go through it.

    Examples
    --------
    >>> from torchrta.complex import make_complex
    >>> z = make_complex(3.0, 4.0, precision="double")
    >>> z * z.conjugate()
    ComplexDouble(real=np.float64(25.0), imag=np.float64(0.0))
    """

    real: Real
    imag: Real = 0.0

    precision: ClassVar[Precision]

    def __post_init__(self):
        if type(self) is Complex:
            raise TypeError(
                "Complex is generic; use make_complex() or complex_type()"
            )
        scalar = real_type(self.precision)
        object.__setattr__(self, "real", scalar(self.real))
        object.__setattr__(self, "imag", scalar(self.imag))

    def to_numpy(self) -> np.complexfloating:
        """Return the equivalent NumPy complex scalar."""
        z = np.zeros((), dtype=complex_scalar_type(self.precision))
        z.real = self.real
        z.imag = self.imag
        return z[()]

    @classmethod
    def from_numpy(cls, z) -> "Complex":
        """Build a value of this precision from a NumPy or Python complex."""
        return cls(z.real, z.imag)

    def conjugate(self) -> "Complex":
        return conjugate(self)

    def __complex__(self) -> complex:
        return complex(float(self.real), float(self.imag))

    def __neg__(self) -> "Complex":
        return type(self)(-self.real, -self.imag)

    def __add__(self, other):
        return add(self, other)

    def __radd__(self, other):
        return add(_coerce(other, type(self)), self)

    def __sub__(self, other):
        return subtract(self, other)

    def __rsub__(self, other):
        return subtract(_coerce(other, type(self)), self)

    def __mul__(self, other):
        if isinstance(other, (Complex, numbers.Complex)) and not isinstance(
            other, numbers.Real
        ):
            return multiply(self, other)
        return multiply_real(self, other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        return divide(self, other)

    def __rtruediv__(self, other):
        return divide(_coerce(other, type(self)), self)


class ComplexSingle(Complex):
    """Complex number with ``float32`` components."""

    precision = "single"


class ComplexDouble(Complex):
    """Complex number with ``float64`` components."""

    precision = "double"


class ComplexExtended(Complex):
    """Complex number with ``numpy.longdouble`` components."""

    precision = "extended"


_COMPLEX_CLASSES = {
    "single": ComplexSingle,
    "double": ComplexDouble,
    "extended": ComplexExtended,
}


def complex_type(precision: Optional[Precision] = None) -> type[Complex]:
    """Return the :class:`Complex` subclass bound to ``precision``.

    Defaults to the configured complex precision.
    """
    if precision is None:
        precision = COMPLEX_PRECISION
    return _COMPLEX_CLASSES[precision]


def make_complex(
    real: Real,
    imag: Real = 0.0,
    *,
    precision: Optional[Precision] = None,
) -> Complex:
    """Construct a complex value.

    Parameters
    ----------
    real : float
        Real component.
    imag : float, optional
        Imaginary component. Default is 0.
    precision : {"single", "double", "extended"}, optional
        Precision of the components. Defaults to the configured complex
        precision.

    Returns
    -------
    z : Complex
    """
    return complex_type(precision)(real, imag)


def _coerce(value, cls: type[Complex]) -> Complex:
    if type(value) is cls:
        return value
    if isinstance(value, (Complex, numbers.Complex)):
        return cls(value.real, value.imag)
    return cls(value, 0.0)


def real(z: Complex) -> np.floating:
    """Real component of ``z``."""
    return z.real


def imag(z: Complex) -> np.floating:
    """Imaginary component of ``z``."""
    return z.imag


def add(a: Complex, b: Complex) -> Complex:
    """Component-wise sum ``a + b``."""
    b = _coerce(b, type(a))
    with np.errstate(all="ignore"):
        return type(a)(a.real + b.real, a.imag + b.imag)


def subtract(a: Complex, b: Complex) -> Complex:
    """Component-wise difference ``a - b``."""
    b = _coerce(b, type(a))
    with np.errstate(all="ignore"):
        return type(a)(a.real - b.real, a.imag - b.imag)


def multiply(a: Complex, b: Complex) -> Complex:
    """Complex product ``a * b``."""
    b = _coerce(b, type(a))
    with np.errstate(all="ignore"):
        return type(a)(
            a.real * b.real - a.imag * b.imag,
            a.imag * b.real + a.real * b.imag,
        )


def multiply_real(a: Complex, s: Real) -> Complex:
    """Scale both components of ``a`` by the real scalar ``s``.

    ``s`` is taken at the precision of ``a``.
    """
    s = real_type(a.precision)(s)
    with np.errstate(all="ignore"):
        return type(a)(a.real * s, a.imag * s)


def divide(a: Complex, b: Complex) -> Complex:
    """Complex quotient ``a / b``.

    A zero denominator is not guarded against; the result holds whatever
    IEEE arithmetic produces (``inf`` or ``nan``).
    """
    b = _coerce(b, type(a))
    with np.errstate(all="ignore"):
        d = b.real * b.real + b.imag * b.imag
        return type(a)(
            (a.real * b.real + a.imag * b.imag) / d,
            (b.real * a.imag - a.real * b.imag) / d,
        )


def conjugate(a: Complex) -> Complex:
    """Complex conjugate ``(a.real, -a.imag)``."""
    return type(a)(a.real, -a.imag)


def set_real(a: Complex, s: Real) -> Complex:
    """Return the purely real value ``(s, 0)`` at the precision of ``a``.

    ``a`` itself is left untouched; values are immutable.
    """
    return type(a)(s, 0.0)
