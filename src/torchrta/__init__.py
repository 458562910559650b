"""torchrta: precision-generic primitives for real-time audio analysis."""

from . import (
    complex,
    filter,
    filter_analysis,
    filter_design,
)
from ._precision import (
    COMPLEX_PRECISION,
    PRECISIONS,
    REAL_PRECISION,
    Precision,
    complex_scalar_type,
    real_type,
    torch_dtype,
)

__all__ = [
    # Submodules
    "complex",
    "filter",
    "filter_analysis",
    "filter_design",
    # Precision
    "COMPLEX_PRECISION",
    "PRECISIONS",
    "REAL_PRECISION",
    "Precision",
    "complex_scalar_type",
    "real_type",
    "torch_dtype",
]

__version__ = "0.1.0"
