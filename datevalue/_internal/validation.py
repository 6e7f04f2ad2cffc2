"""Validation utilities for datevalue.

This module is not part of the public API.
"""

from __future__ import annotations

from datevalue._internal.calendar import is_valid_date
from datevalue.errors import InvalidDateError


def validate_date(month: int, day: int, year: int) -> None:
    """Validate that month, day and year form a valid date.

    Args:
        month: The month to validate.
        day: The day to validate.
        year: The year to validate.

    Raises:
        InvalidDateError: If the triple is not a valid date. The error
            carries all three values.
    """
    if not is_valid_date(month, day, year):
        raise InvalidDateError(month, day, year)


__all__ = [
    "validate_date",
]
