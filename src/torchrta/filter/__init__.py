"""Application of designed filters to signals."""

from ._biquad_filter import biquad_filter

__all__ = [
    "biquad_filter",
]
