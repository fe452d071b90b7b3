"""
Unit tests for financial calculation helpers.
"""

import math

import pytest

from rebalancer.core.exceptions.backtest import CalculationError
from rebalancer.core.types import (
    fraction_to_percent,
    percent_to_fraction,
    round_percentage,
    round_price,
    safe_float_comparison,
    to_float,
    validate_finite,
)


class TestRoundPrice:
    """Test suite for whole-unit price rounding."""

    @pytest.mark.parametrize(
        ("price", "expected"),
        [
            (100.4, 100.0),
            (100.5, 101.0),
            (2.5, 3.0),
            (6962.5, 6963.0),
            (0.49, 0.0),
            (0.0, 0.0),
        ],
    )
    def test_should_round_half_up(self, price: float, expected: float) -> None:
        """Test halves round up instead of to even."""
        assert round_price(price) == expected

    def test_should_return_float(self) -> None:
        """Test return type stays float."""
        assert isinstance(round_price(10.2), float)


class TestConversions:
    """Test suite for percent/fraction conversions."""

    def test_should_convert_percent_to_fraction(self) -> None:
        assert percent_to_fraction(50) == 0.5
        assert percent_to_fraction(100) == 1.0

    def test_should_convert_fraction_to_percent(self) -> None:
        assert fraction_to_percent(0.25) == 25.0

    def test_should_convert_to_float(self) -> None:
        assert to_float("1.5") == 1.5
        assert to_float(50000) == 50000.0

    def test_should_round_percentage(self) -> None:
        assert round_percentage(12.345678) == 12.3457


class TestValidateFinite:
    """Test suite for validate_finite."""

    def test_should_pass_finite_values(self) -> None:
        assert validate_finite(1.5) == 1.5

    @pytest.mark.parametrize("value", [math.inf, -math.inf, math.nan])
    def test_should_reject_non_finite_values(self, value: float) -> None:
        with pytest.raises(CalculationError, match="Non-finite result"):
            validate_finite(value, "CAGR")

    def test_should_compare_with_tolerance(self) -> None:
        assert safe_float_comparison(0.1 + 0.2, 0.3)
        assert not safe_float_comparison(1.0, 1.1)
