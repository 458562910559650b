"""Shared pieces of the audio-EQ cookbook biquad designs."""

from __future__ import annotations

from typing import NamedTuple, Optional

import numpy as np

from .._precision import Precision, real_type


class BiquadCoefficients(NamedTuple):
    """Normalized second-order section coefficients.

    The transfer function is

        H(z) = (b0 + b1 z^-1 + b2 z^-2) / (1 + a1 z^-1 + a2 z^-2)

    ``a0`` is always 1 and is not stored: every coefficient has already been
    divided by the analog ``a0``.

    Parameters
    ----------
    b0, b1, b2 : numpy.floating
        Feedforward coefficients.
    a1, a2 : numpy.floating
        Feedback coefficients.
    """

    b0: np.floating
    b1: np.floating
    b2: np.floating
    a1: np.floating
    a2: np.floating

    @property
    def b(self) -> tuple[np.floating, np.floating, np.floating]:
        """Feedforward coefficients ``(b0, b1, b2)``."""
        return (self.b0, self.b1, self.b2)

    @property
    def a(self) -> tuple[np.floating, np.floating]:
        """Feedback coefficients ``(a1, a2)``."""
        return (self.a1, self.a2)


def _scalar(value, precision: Optional[Precision]) -> np.floating:
    return real_type(precision)(value)


def _derived_quantities(
    f0, q, precision: Optional[Precision]
) -> tuple[np.floating, np.floating, np.floating]:
    """Return ``(sin(w0), cos(w0), alpha)`` with ``w0 = pi * f0``.

    ``pi`` is evaluated at the working precision so that extended precision
    does not inherit a double-rounded constant.
    """
    pi = np.arccos(_scalar(-1.0, precision))
    w0 = pi * _scalar(f0, precision)
    s = np.sin(w0)
    alpha = s / (2.0 * _scalar(q, precision))
    return s, np.cos(w0), alpha
