"""Second-order (biquad) IIR filter design from the audio-EQ cookbook."""

from ._biquad_allpass import biquad_allpass
from ._biquad_bandpass_constant_peak import biquad_bandpass_constant_peak
from ._biquad_bandpass_constant_skirt import biquad_bandpass_constant_skirt
from ._biquad_coefficients import BiquadType, biquad_coefficients
from ._biquad_design import biquad_design
from ._biquad_highpass import biquad_highpass
from ._biquad_highshelf import biquad_highshelf
from ._biquad_lowpass import biquad_lowpass
from ._biquad_lowshelf import biquad_lowshelf
from ._biquad_notch import biquad_notch
from ._biquad_peaking import biquad_peaking
from ._constants import (
    Q_BUTTERWORTH,
    Q_MEDIUM,
    Q_NARROW,
    Q_WIDE,
)
from ._cookbook import BiquadCoefficients

__all__ = [
    # Design functions
    "biquad_allpass",
    "biquad_bandpass_constant_peak",
    "biquad_bandpass_constant_skirt",
    "biquad_highpass",
    "biquad_highshelf",
    "biquad_lowpass",
    "biquad_lowshelf",
    "biquad_notch",
    "biquad_peaking",
    # Dispatch
    "biquad_coefficients",
    "biquad_design",
    # Types
    "BiquadCoefficients",
    "BiquadType",
    # Constants
    "Q_BUTTERWORTH",
    "Q_MEDIUM",
    "Q_NARROW",
    "Q_WIDE",
]
