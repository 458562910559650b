"""Tests for the bandpass biquad designs."""

import math

import pytest
import torch

from torchrta.filter_analysis import biquad_frequency_response
from torchrta.filter_design import (
    biquad_bandpass_constant_peak,
    biquad_bandpass_constant_skirt,
)


def magnitude_at(coefficients, frequencies):
    _, response = biquad_frequency_response(
        coefficients.b,
        coefficients.a,
        torch.tensor(frequencies, dtype=torch.float64),
    )
    return response.abs()


class TestBiquadBandpassConstantSkirt:
    """Tests for the constant skirt gain bandpass."""

    @pytest.mark.parametrize("q", [0.5, 1.0, 4.0])
    def test_peak_gain_equals_q(self, q: float) -> None:
        coefficients = biquad_bandpass_constant_skirt(
            0.3, q, precision="double"
        )
        assert magnitude_at(coefficients, [0.3]).item() == pytest.approx(q)

    def test_zeros_at_dc_and_nyquist(self) -> None:
        coefficients = biquad_bandpass_constant_skirt(
            0.3, 2.0, precision="double"
        )
        response = magnitude_at(coefficients, [0.0, 1.0])

        torch.testing.assert_close(
            response,
            torch.zeros(2, dtype=torch.float64),
            rtol=0.0,
            atol=1e-12,
        )

    def test_numerator_structure(self) -> None:
        coefficients = biquad_bandpass_constant_skirt(0.2, 1.5)

        assert coefficients.b1 == 0.0
        assert coefficients.b2 == -coefficients.b0


class TestBiquadBandpassConstantPeak:
    """Tests for the 0 dB peak bandpass."""

    @pytest.mark.parametrize("q", [0.5, 1.0, 4.0])
    @pytest.mark.parametrize("f0", [0.1, 0.5, 0.7])
    def test_unity_peak_gain(self, f0: float, q: float) -> None:
        coefficients = biquad_bandpass_constant_peak(f0, q, precision="double")
        assert magnitude_at(coefficients, [f0]).item() == pytest.approx(1.0)

    def test_higher_q_is_narrower(self) -> None:
        wide = biquad_bandpass_constant_peak(0.3, 0.7, precision="double")
        narrow = biquad_bandpass_constant_peak(0.3, 8.0, precision="double")

        assert magnitude_at(narrow, [0.2]).item() < magnitude_at(
            wide, [0.2]
        ).item()

    def test_b0_is_normalized_alpha(self) -> None:
        f0, q = 0.4, 1.2
        coefficients = biquad_bandpass_constant_peak(f0, q, precision="double")
        alpha = math.sin(math.pi * f0) / (2.0 * q)

        assert coefficients.b0 == pytest.approx(alpha / (1.0 + alpha))
        assert coefficients.b1 == 0.0
        assert coefficients.b2 == -coefficients.b0
