"""
Validation utilities for core domain models.

Provides consistent validation across the application.
"""

import math
import numbers
import re
from datetime import date, datetime

from rebalancer.core.constants import ISO_DATE_FORMAT
from rebalancer.core.exceptions.backtest import ValidationError

_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def validate_positive(value: float, param_name: str) -> float:
    """Validate that a numeric value is positive.

    Args:
        value: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated value

    Raises:
        ValidationError: If value is not positive
    """
    if not _is_real_number(value) or value <= 0:
        raise ValidationError(f"{param_name} must be positive, got {value}")
    return value


def validate_non_negative(value: float, param_name: str) -> float:
    """Validate that a numeric value is zero or greater.

    Raises:
        ValidationError: If value is negative or not a finite number
    """
    if not _is_real_number(value) or value < 0:
        raise ValidationError(f"{param_name} must be non-negative, got {value}")
    return value


def validate_percentage(value: float, param_name: str = "percentage") -> float:
    """Validate that a value is a valid percentage (0-100].

    Args:
        value: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated percentage

    Raises:
        ValidationError: If value is not in (0, 100]
    """
    if not _is_real_number(value) or value <= 0 or value > 100:
        raise ValidationError(f"{param_name} must be between 0 and 100, got {value}")
    return value


def validate_ratio_percent(value: float, param_name: str = "ratio") -> float:
    """Validate that a value is a strictly interior percentage (0-100).

    A target allocation of 0% or 100% leaves nothing to rebalance against.

    Args:
        value: Value to validate
        param_name: Parameter name for error messages

    Returns:
        The validated percentage

    Raises:
        ValidationError: If value is not in (0, 100)
    """
    if not _is_real_number(value) or value <= 0 or value >= 100:
        raise ValidationError(
            f"{param_name} must be strictly between 0 and 100, got {value}"
        )
    return value


def validate_iso_date(value: str, param_name: str = "date") -> str:
    """Validate that a value is a calendar day in ISO 8601 form (YYYY-MM-DD).

    Args:
        value: Date string to validate
        param_name: Parameter name for error messages

    Returns:
        The validated date string

    Raises:
        ValidationError: If value is not a valid YYYY-MM-DD date
    """
    if not isinstance(value, str) or not _ISO_DATE_PATTERN.match(value):
        raise ValidationError(f"{param_name} must be an ISO date (YYYY-MM-DD), got {value!r}")
    try:
        datetime.strptime(value, ISO_DATE_FORMAT)
    except ValueError as e:
        raise ValidationError(f"{param_name} is not a valid calendar day: {value}") from e
    return value


def validate_date_range(start_date: str, end_date: str) -> tuple[str, str]:
    """Validate that start_date is on or before end_date.

    Raises:
        ValidationError: If either date is malformed or start is after end
    """
    validate_iso_date(start_date, "start_date")
    validate_iso_date(end_date, "end_date")
    if start_date > end_date:
        raise ValidationError(
            f"start_date must be before or equal to end_date, got {start_date} > {end_date}"
        )
    return start_date, end_date


def parse_iso_date(value: str) -> date:
    """Parse a validated YYYY-MM-DD string into a date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def _is_real_number(value: object) -> bool:
    """Check for a finite real number (numpy scalars included) that is not a bool."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)
