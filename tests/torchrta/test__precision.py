"""Tests for precision selection."""

import numpy as np
import pytest
import torch

from torchrta import (
    COMPLEX_PRECISION,
    PRECISIONS,
    REAL_PRECISION,
    complex_scalar_type,
    real_type,
    torch_dtype,
)
from torchrta._precision import _resolve


class TestPrecisionTypes:
    """Tests for the precision to type mappings."""

    @pytest.mark.parametrize(
        "precision, expected",
        [
            ("single", np.float32),
            ("double", np.float64),
            ("extended", np.longdouble),
        ],
    )
    def test_real_type(self, precision, expected) -> None:
        assert real_type(precision) is expected

    @pytest.mark.parametrize(
        "precision, expected",
        [
            ("single", np.complex64),
            ("double", np.complex128),
            ("extended", np.clongdouble),
        ],
    )
    def test_complex_scalar_type(self, precision, expected) -> None:
        assert complex_scalar_type(precision) is expected

    @pytest.mark.parametrize(
        "precision, expected",
        [
            ("single", torch.float32),
            ("double", torch.float64),
            ("extended", torch.float64),
        ],
    )
    def test_torch_dtype(self, precision, expected) -> None:
        assert torch_dtype(precision) == expected

    def test_defaults_follow_configuration(self) -> None:
        assert real_type() is real_type(REAL_PRECISION)
        assert complex_scalar_type() is complex_scalar_type(COMPLEX_PRECISION)
        assert torch_dtype() == torch_dtype(REAL_PRECISION)

    def test_configured_precisions_are_known(self) -> None:
        assert REAL_PRECISION in PRECISIONS
        assert COMPLEX_PRECISION in PRECISIONS


class TestResolve:
    """Tests for reading the precision from the environment."""

    def test_default_when_unset(self, monkeypatch) -> None:
        monkeypatch.delenv("TORCHRTA_TEST_TYPE", raising=False)
        assert _resolve("TORCHRTA_TEST_TYPE", "double") == "double"

    def test_case_insensitive(self, monkeypatch) -> None:
        monkeypatch.setenv("TORCHRTA_TEST_TYPE", " Single ")
        assert _resolve("TORCHRTA_TEST_TYPE", "double") == "single"

    def test_unknown_name_raises(self, monkeypatch) -> None:
        monkeypatch.setenv("TORCHRTA_TEST_TYPE", "quadruple")
        with pytest.raises(ValueError, match="TORCHRTA_TEST_TYPE"):
            _resolve("TORCHRTA_TEST_TYPE", "double")
