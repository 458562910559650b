"""Frequency-domain analysis of biquad filters."""

from ._biquad_frequency_response import biquad_frequency_response
from ._biquad_response import biquad_response

__all__ = [
    "biquad_frequency_response",
    "biquad_response",
]
