"""Biquad design by filter type."""

from __future__ import annotations

from typing import Callable, Literal, MutableSequence, NamedTuple, Optional

import numpy as np

from .._precision import Precision
from ._biquad_allpass import biquad_allpass
from ._biquad_bandpass_constant_peak import biquad_bandpass_constant_peak
from ._biquad_bandpass_constant_skirt import biquad_bandpass_constant_skirt
from ._biquad_highpass import biquad_highpass
from ._biquad_highshelf import biquad_highshelf
from ._biquad_lowpass import biquad_lowpass
from ._biquad_lowshelf import biquad_lowshelf
from ._biquad_notch import biquad_notch
from ._biquad_peaking import biquad_peaking
from ._cookbook import BiquadCoefficients, _scalar

BiquadType = Literal[
    "lowpass",
    "highpass",
    "bandpass_constant_skirt",
    "bandpass_constant_peak",
    "notch",
    "allpass",
    "peaking",
    "lowshelf",
    "highshelf",
]


class _BiquadDesign(NamedTuple):
    designer: Callable[..., BiquadCoefficients]
    # True when the designer takes ``gain`` itself; otherwise the gain is
    # applied afterwards to b0, b1 and b2.
    embeds_gain: bool


_BIQUAD_DESIGNS: dict[str, _BiquadDesign] = {
    "lowpass": _BiquadDesign(biquad_lowpass, False),
    "highpass": _BiquadDesign(biquad_highpass, False),
    "bandpass_constant_skirt": _BiquadDesign(
        biquad_bandpass_constant_skirt, False
    ),
    "bandpass_constant_peak": _BiquadDesign(
        biquad_bandpass_constant_peak, False
    ),
    "notch": _BiquadDesign(biquad_notch, False),
    "allpass": _BiquadDesign(biquad_allpass, False),
    "peaking": _BiquadDesign(biquad_peaking, True),
    "lowshelf": _BiquadDesign(biquad_lowshelf, True),
    "highshelf": _BiquadDesign(biquad_highshelf, True),
}


def _design(
    filter_type: BiquadType,
    f0: float,
    q: float,
    gain: float,
    precision: Optional[Precision],
) -> BiquadCoefficients:
    try:
        designer, embeds_gain = _BIQUAD_DESIGNS[filter_type]
    except KeyError:
        raise ValueError(
            f"filter_type must be one of {tuple(_BIQUAD_DESIGNS)}, "
            f"got {filter_type!r}"
        ) from None

    if embeds_gain:
        return designer(f0, q, gain, precision=precision)

    coefficients = designer(f0, q, precision=precision)

    if gain != 1.0:
        g = _scalar(gain, precision)
        with np.errstate(all="ignore"):
            coefficients = coefficients._replace(
                b0=coefficients.b0 * g,
                b1=coefficients.b1 * g,
                b2=coefficients.b2 * g,
            )

    return coefficients


def biquad_coefficients(
    filter_type: BiquadType,
    b: MutableSequence,
    a: MutableSequence,
    f0: float,
    q: float,
    gain: float = 1.0,
    *,
    precision: Optional[Precision] = None,
) -> None:
    """
    Design a biquad of the given type into caller-supplied storage.

    Parameters
    ----------
    filter_type : str
        One of ``"lowpass"``, ``"highpass"``, ``"bandpass_constant_skirt"``,
        ``"bandpass_constant_peak"``, ``"notch"``, ``"allpass"``,
        ``"peaking"``, ``"lowshelf"`` or ``"highshelf"``.
    b : mutable sequence
        Receives ``b0, b1, b2`` at indices 0 to 2.
    a : mutable sequence
        Receives ``a1, a2`` at indices 0 and 1. ``a0`` is 1 and not written.
    f0 : float
        Cutoff or center frequency, normalized so that 1 is the Nyquist
        frequency.
    q : float
        Quality factor.
    gain : float, optional
        Linear gain. The peaking and shelving types use it in their design;
        for every other type it scales ``b0, b1, b2`` when different from 1.
        Default is 1.
    precision : {"single", "double", "extended"}, optional
        Working precision. Defaults to the configured real precision.

    Raises
    ------
    ValueError
        If ``filter_type`` is not a known biquad type.

    Notes
    -----
    Numeric arguments are not checked. Out-of-range ``f0``, non-positive
    ``q`` or non-positive ``gain`` produce infinite or NaN coefficients
    without any warning.

    Examples
    --------
    >>> import numpy as np
    >>> from torchrta.filter_design import biquad_coefficients
    >>> b = np.empty(3)
    >>> a = np.empty(2)
    >>> biquad_coefficients("highpass", b, a, 0.05, 0.707, gain=0.5)
    """
    coefficients = _design(filter_type, f0, q, gain, precision)

    b[0], b[1], b[2] = coefficients.b
    a[0], a[1] = coefficients.a
