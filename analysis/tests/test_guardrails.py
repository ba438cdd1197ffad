"""
Tests for call-boundary guardrails.
"""

import pytest
import math
import numpy as np
import random

from analysis.guardrails import (
    validate_window,
    validate_rng,
    validate_volatility,
    is_displayable,
    ContractViolation
)


class TestValidateWindow:
    """Tests for validate_window."""

    def test_valid(self):
        assert validate_window(90, 'lookback_days') == 90
        assert validate_window(0, 'horizon_days') == 0

    def test_numpy_integer(self):
        result = validate_window(np.int64(7), 'horizon_days')

        assert result == 7
        assert type(result) is int

    def test_negative(self):
        with pytest.raises(ContractViolation, match="lookback_days must be non-negative"):
            validate_window(-1, 'lookback_days')

    @pytest.mark.parametrize("value", [7.0, "7", None, True])
    def test_non_integer(self, value):
        with pytest.raises(ContractViolation, match="must be an integer"):
            validate_window(value, 'horizon_days')

    def test_is_value_error(self):
        """Callers catching ValueError also catch contract violations."""
        with pytest.raises(ValueError):
            validate_window(-5, 'horizon_days')


class TestValidateRng:
    """Tests for validate_rng."""

    def test_generator_accepted(self):
        rng = np.random.default_rng(0)
        assert validate_rng(rng) is rng

    def test_stdlib_random_rejected(self):
        with pytest.raises(ContractViolation, match="numpy.random.Generator"):
            validate_rng(random.Random(0))

    def test_none_rejected(self):
        with pytest.raises(ContractViolation):
            validate_rng(None)


class TestValidateVolatility:
    """Tests for validate_volatility."""

    def test_valid(self):
        assert validate_volatility(0.02) == 0.02
        assert validate_volatility(0) == 0.0

    def test_nan(self):
        with pytest.raises(ContractViolation, match="finite"):
            validate_volatility(math.nan)

    def test_negative(self):
        with pytest.raises(ContractViolation, match="non-negative"):
            validate_volatility(-0.001)


class TestIsDisplayable:
    """Tests for is_displayable."""

    @pytest.mark.parametrize("value", [0, 1.5, -2.0, np.float64(0.3)])
    def test_finite(self, value):
        assert is_displayable(value)

    @pytest.mark.parametrize("value", [None, math.inf, -math.inf, math.nan, "1.0", True])
    def test_not_displayable(self, value):
        assert not is_displayable(value)
