"""Tests for biquad_allpass."""

import pytest
import torch

from torchrta.filter_analysis import biquad_frequency_response
from torchrta.filter_design import biquad_allpass


class TestBiquadAllpass:
    """Tests for the allpass design."""

    @pytest.mark.parametrize("f0", [0.01, 0.1, 0.25, 0.5, 0.75, 0.99])
    @pytest.mark.parametrize("q", [0.3, 0.70710678, 1.0, 5.0, 30.0])
    def test_unit_magnitude(self, f0: float, q: float) -> None:
        coefficients = biquad_allpass(f0, q, precision="double")

        _, response = biquad_frequency_response(
            coefficients.b, coefficients.a, frequencies=4096
        )

        torch.testing.assert_close(
            response.abs(),
            torch.ones(4096, dtype=torch.float64),
            rtol=0.0,
            atol=1e-6,
        )

    def test_unit_magnitude_single_precision(self) -> None:
        coefficients = biquad_allpass(0.2, 2.0, precision="single")

        _, response = biquad_frequency_response(
            coefficients.b, coefficients.a, frequencies=1024
        )

        torch.testing.assert_close(
            response.abs(),
            torch.ones(1024, dtype=torch.float64),
            rtol=0.0,
            atol=1e-5,
        )

    def test_numerator_mirrors_denominator(self) -> None:
        coefficients = biquad_allpass(0.3, 1.5, precision="double")

        assert coefficients.b0 == coefficients.a2
        assert coefficients.b1 == coefficients.a1
        assert coefficients.b2 == pytest.approx(1.0)

    def test_phase_at_center_frequency(self) -> None:
        coefficients = biquad_allpass(0.4, 1.0, precision="double")

        _, response = biquad_frequency_response(
            coefficients.b,
            coefficients.a,
            torch.tensor([0.4], dtype=torch.float64),
        )

        assert abs(torch.angle(response).item()) == pytest.approx(torch.pi)
