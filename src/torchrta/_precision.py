"""Floating-point precision selection.

The precision is chosen once, when the package is imported, from the
``TORCHRTA_REAL_TYPE`` and ``TORCHRTA_COMPLEX_TYPE`` environment variables.
The complex precision defaults to the real precision.
"""

from __future__ import annotations

import os
import warnings
from typing import Final, Literal, Optional, get_args

import numpy as np
import torch

Precision = Literal["single", "double", "extended"]

PRECISIONS: Final = get_args(Precision)

_REAL_TYPES = {
    "single": np.float32,
    "double": np.float64,
    "extended": np.longdouble,
}

_COMPLEX_TYPES = {
    "single": np.complex64,
    "double": np.complex128,
    "extended": np.clongdouble,
}

# torch has no real dtype wider than float64
_TORCH_DTYPES = {
    "single": torch.float32,
    "double": torch.float64,
    "extended": torch.float64,
}


def _resolve(variable: str, default: str) -> Precision:
    value = os.environ.get(variable, default).strip().lower()
    if value not in PRECISIONS:
        raise ValueError(
            f"{variable} must be one of {PRECISIONS}, got {value!r}"
        )
    return value


REAL_PRECISION: Final[Precision] = _resolve("TORCHRTA_REAL_TYPE", "double")
COMPLEX_PRECISION: Final[Precision] = _resolve(
    "TORCHRTA_COMPLEX_TYPE", REAL_PRECISION
)

if "extended" in (REAL_PRECISION, COMPLEX_PRECISION):
    if np.finfo(np.longdouble).nmant <= np.finfo(np.float64).nmant:
        warnings.warn(
            "Extended precision was selected but numpy.longdouble is no "
            "wider than float64 on this platform.",
            RuntimeWarning,
            stacklevel=2,
        )


def real_type(precision: Optional[Precision] = None) -> type:
    """Return the NumPy real scalar type for ``precision``.

    Defaults to the configured real precision.
    """
    if precision is None:
        precision = REAL_PRECISION
    return _REAL_TYPES[precision]


def complex_scalar_type(precision: Optional[Precision] = None) -> type:
    """Return the NumPy complex scalar type for ``precision``.

    Defaults to the configured complex precision.
    """
    if precision is None:
        precision = COMPLEX_PRECISION
    return _COMPLEX_TYPES[precision]


def torch_dtype(precision: Optional[Precision] = None) -> torch.dtype:
    """Return the torch real dtype used to store values at ``precision``.

    Extended precision is stored as ``torch.float64``.
    """
    if precision is None:
        precision = REAL_PRECISION
    return _TORCH_DTYPES[precision]
