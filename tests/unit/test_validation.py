"""
Unit tests for validation utilities.
"""

import math

import numpy as np
import pytest

from rebalancer.core.exceptions.backtest import ValidationError
from rebalancer.core.utils.validation import (
    validate_date_range,
    validate_iso_date,
    validate_non_negative,
    validate_percentage,
    validate_positive,
    validate_ratio_percent,
)


class TestValidationUtils:
    """Test validation utility functions."""

    def test_should_validate_positive_values(self) -> None:
        """Test positive value validation."""
        assert validate_positive(1.0, "initial_capital") == 1.0
        assert validate_positive(100000, "initial_capital") == 100000

    def test_should_reject_non_positive_values(self) -> None:
        """Test positive validation rejects invalid values."""
        with pytest.raises(ValidationError, match="initial_capital must be positive"):
            validate_positive(0, "initial_capital")

        with pytest.raises(ValidationError, match="initial_capital must be positive"):
            validate_positive(-10, "initial_capital")

        with pytest.raises(ValidationError, match="initial_capital must be positive"):
            validate_positive(math.inf, "initial_capital")

    def test_should_reject_booleans_and_strings(self) -> None:
        """Test non-numeric values are rejected."""
        with pytest.raises(ValidationError):
            validate_positive(True, "initial_capital")  # type: ignore[arg-type]

        with pytest.raises(ValidationError):
            validate_positive("100", "initial_capital")  # type: ignore[arg-type]

    def test_should_validate_non_negative(self) -> None:
        """Test zero is allowed for prices."""
        assert validate_non_negative(0.0, "price") == 0.0

        with pytest.raises(ValidationError, match="price must be non-negative"):
            validate_non_negative(-1.0, "price")

        with pytest.raises(ValidationError, match="price must be non-negative"):
            validate_non_negative(math.nan, "price")

    def test_should_accept_numpy_scalars(self) -> None:
        """Test values coming out of pandas or numpy pass validation."""
        assert validate_non_negative(np.int64(100), "price") == 100
        assert validate_positive(np.float64(2.5), "initial_capital") == 2.5

        with pytest.raises(ValidationError, match="price must be non-negative"):
            validate_non_negative(np.int64(-1), "price")

    def test_should_validate_percentage(self) -> None:
        """Test percentage validation accepts (0, 100]."""
        assert validate_percentage(50.0) == 50.0
        assert validate_percentage(100.0) == 100.0
        assert validate_percentage(0.1) == 0.1

    def test_should_reject_invalid_percentage(self) -> None:
        """Test percentage validation rejects invalid values."""
        with pytest.raises(ValidationError, match="percentage must be between 0 and 100"):
            validate_percentage(0)

        with pytest.raises(ValidationError, match="threshold must be between 0 and 100"):
            validate_percentage(100.1, "threshold")

    def test_should_validate_ratio_percent(self) -> None:
        """Test ratios must be strictly inside (0, 100)."""
        assert validate_ratio_percent(1.0) == 1.0
        assert validate_ratio_percent(99.0) == 99.0

        for value in (0, 100, -5, 101):
            with pytest.raises(ValidationError, match="strictly between 0 and 100"):
                validate_ratio_percent(value)


class TestDateValidation:
    """Test ISO date validation."""

    def test_should_accept_iso_dates(self) -> None:
        assert validate_iso_date("2020-02-29") == "2020-02-29"

    @pytest.mark.parametrize("value", ["2020-1-1", "01/02/2020", "2020-02-30", "", None])
    def test_should_reject_malformed_dates(self, value: object) -> None:
        with pytest.raises(ValidationError):
            validate_iso_date(value)  # type: ignore[arg-type]

    def test_should_validate_date_range(self) -> None:
        assert validate_date_range("2020-01-01", "2020-01-01") == ("2020-01-01", "2020-01-01")

        with pytest.raises(ValidationError, match="start_date must be before or equal"):
            validate_date_range("2020-02-01", "2020-01-01")
