import math

import hypothesis
import hypothesis.strategies
import numpy as np
import pytest
import torch

from torchrta.complex import ComplexDouble, ComplexSingle, absolute, angle
from torchrta.filter_analysis import (
    biquad_frequency_response,
    biquad_response,
)
from torchrta.filter_design import biquad_allpass, biquad_peaking


class TestBiquadResponse:
    """Tests for single-frequency evaluation in scalar complex arithmetic."""

    @pytest.mark.parametrize("f", [0.0, 0.1, 0.25, 0.5, 0.9, 1.0])
    def test_matches_tensor_response(self, f: float) -> None:
        coefficients = biquad_peaking(0.3, 1.5, 4.0, precision="double")

        h = biquad_response(
            coefficients.b, coefficients.a, math.pi * f, precision="double"
        )

        _, expected = biquad_frequency_response(
            [float(value) for value in coefficients.b],
            [float(value) for value in coefficients.a],
            frequencies=torch.tensor([f], dtype=torch.float64),
        )

        assert complex(h) == pytest.approx(complex(expected[0]), rel=1e-12)

    @hypothesis.given(
        f0=hypothesis.strategies.floats(min_value=0.01, max_value=0.99),
        q=hypothesis.strategies.floats(min_value=0.1, max_value=10.0),
        w=hypothesis.strategies.floats(min_value=0.0, max_value=math.pi),
    )
    def test_allpass_has_unit_magnitude(self, f0, q, w) -> None:
        coefficients = biquad_allpass(f0, q, precision="double")

        h = biquad_response(
            coefficients.b, coefficients.a, w, precision="double"
        )

        assert float(absolute(h)) == pytest.approx(1.0, abs=1e-9)

    def test_dc_of_identity_section(self) -> None:
        h = biquad_response(
            (1.0, 0.0, 0.0), (0.0, 0.0), 0.0, precision="double"
        )

        assert h == ComplexDouble(1.0, 0.0)

    def test_pure_delay_phase(self) -> None:
        h = biquad_response(
            (0.0, 1.0, 0.0), (0.0, 0.0), 0.5, precision="double"
        )

        assert float(absolute(h)) == pytest.approx(1.0)
        assert float(angle(h)) == pytest.approx(-0.5)

    def test_result_precision(self) -> None:
        coefficients = biquad_peaking(0.3, 1.5, 4.0, precision="single")

        h = biquad_response(
            coefficients.b, coefficients.a, 0.5, precision="single"
        )

        assert isinstance(h, ComplexSingle)
        assert type(h.real) is np.float32
