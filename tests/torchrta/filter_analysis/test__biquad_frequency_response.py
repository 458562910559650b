"""Tests for biquad_frequency_response."""

import math

import numpy as np
import pytest
import torch
from scipy import signal as scipy_signal

from torchrta.filter_analysis import biquad_frequency_response
from torchrta.filter_design import biquad_design


def scipy_freqz(b, a, **kwargs):
    return scipy_signal.freqz(
        b.numpy(), np.concatenate([[1.0], a.numpy()]), **kwargs
    )


class TestBiquadFrequencyResponse:
    """Tests for biquad_frequency_response."""

    @pytest.mark.parametrize(
        "filter_type, gain",
        [
            ("lowpass", 1.0),
            ("highpass", 1.0),
            ("bandpass_constant_skirt", 1.0),
            ("notch", 1.0),
            ("allpass", 1.0),
            ("peaking", 4.0),
            ("lowshelf", 0.5),
            ("highshelf", 2.0),
        ],
    )
    def test_matches_scipy_freqz(self, filter_type: str, gain: float) -> None:
        """Should produce same result as scipy.signal.freqz."""
        b, a = biquad_design(filter_type, 0.3, 1.5, gain, dtype=torch.float64)

        freqs, response = biquad_frequency_response(b, a, frequencies=256)

        w_scipy, h_scipy = scipy_freqz(b, a, worN=256)

        torch.testing.assert_close(
            freqs * math.pi, torch.from_numpy(w_scipy), rtol=1e-12, atol=1e-12
        )
        torch.testing.assert_close(
            response, torch.from_numpy(h_scipy), rtol=1e-9, atol=1e-12
        )

    def test_whole_circle(self) -> None:
        b, a = biquad_design("peaking", 0.2, 2.0, 3.0, dtype=torch.float64)

        freqs, response = biquad_frequency_response(
            b, a, frequencies=128, whole=True
        )
        w_scipy, h_scipy = scipy_freqz(b, a, worN=128, whole=True)

        assert freqs[-1] < 2.0
        torch.testing.assert_close(
            freqs * math.pi, torch.from_numpy(w_scipy), rtol=1e-12, atol=1e-12
        )
        torch.testing.assert_close(
            response, torch.from_numpy(h_scipy), rtol=1e-9, atol=1e-12
        )

    def test_sampling_frequency(self) -> None:
        b, a = biquad_design("lowpass", 0.25, 0.707, dtype=torch.float64)

        freqs, response = biquad_frequency_response(
            b, a, frequencies=64, sampling_frequency=48000.0
        )
        _, expected = biquad_frequency_response(b, a, frequencies=64)

        assert freqs[0] == 0.0
        assert freqs[-1] < 24000.0
        torch.testing.assert_close(response, expected)

    def test_explicit_frequencies(self) -> None:
        b, a = biquad_design(
            "lowpass", 0.5, 1 / math.sqrt(2), dtype=torch.float64
        )

        _, response = biquad_frequency_response(
            b,
            a,
            frequencies=torch.tensor([0.0, 0.5, 1.0], dtype=torch.float64),
        )

        # Butterworth: unity at DC, half power at cutoff, zero at Nyquist
        expected = torch.tensor(
            [1.0, 1 / math.sqrt(2), 0.0], dtype=torch.float64
        )
        torch.testing.assert_close(
            response.abs(), expected, rtol=1e-10, atol=1e-10
        )

    def test_sequence_coefficients(self) -> None:
        freqs, response = biquad_frequency_response(
            [0.5, 0.0, 0.0], [0.0, 0.0], frequencies=8
        )

        assert freqs.dtype == torch.float64
        assert response.dtype == torch.complex128
        torch.testing.assert_close(
            response, torch.full((8,), 0.5 + 0j, dtype=torch.complex128)
        )

    def test_single_precision_output(self) -> None:
        b, a = biquad_design("highpass", 0.1, 0.707, dtype=torch.float32)

        freqs, response = biquad_frequency_response(b, a, frequencies=16)

        assert freqs.dtype == torch.float32
        assert response.dtype == torch.complex64

    def test_explicit_dtype(self) -> None:
        b, a = biquad_design("highpass", 0.1, 0.707, dtype=torch.float64)

        _, response = biquad_frequency_response(
            b, a, frequencies=16, dtype=torch.complex64
        )

        assert response.dtype == torch.complex64

    @pytest.mark.parametrize(
        "b, a",
        [
            (torch.zeros(2), torch.zeros(2)),
            (torch.zeros(3), torch.zeros(3)),
            (torch.zeros(1, 3), torch.zeros(2)),
        ],
    )
    def test_invalid_shapes_raise(self, b, a) -> None:
        with pytest.raises(ValueError, match="shape"):
            biquad_frequency_response(b, a)
