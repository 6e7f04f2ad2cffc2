"""Comparison operations for DateValue.

This module provides explicit comparison functions for dates, for
callers that prefer plain functions over operator dispatch (for
example as sort keys or reducers).

Comparison Rules:
    - Dates are ordered by year, then month, then day
    - Values of any other type are never equal to a date and cannot be
      ordered against one

Supported Operations:
    - equal: Test equality
    - compare: Three-way comparison (-1, 0, 1)
    - earliest: Smallest of several dates
    - latest: Largest of several dates
"""

from __future__ import annotations

from datevalue.core.date import DateValue


def _require_dates(*values: object) -> None:
    for value in values:
        if not isinstance(value, DateValue):
            raise TypeError(f"expected DateValue, got {type(value).__name__}")


def equal(left: DateValue, right: DateValue) -> bool:
    """Test equality between two dates.

    Args:
        left: First date.
        right: Second date.

    Returns:
        True if month, day and year all match. False if the values are
        of different types.

    Raises:
        TypeError: If both values are of a type other than DateValue.

    Examples:
        >>> equal(DateValue(1, 15, 2024), DateValue(1, 15, 2024))
        True
        >>> equal(DateValue(1, 15, 2024), DateValue(1, 16, 2024))
        False
    """
    if type(left) is not type(right):
        return False
    _require_dates(left, right)
    return left.to_tuple() == right.to_tuple()


def compare(left: DateValue, right: DateValue) -> int:
    """Compare two dates chronologically.

    Args:
        left: First date.
        right: Second date.

    Returns:
        -1 if left is earlier, 0 if equal, 1 if left is later.

    Raises:
        TypeError: If either value is not a DateValue.

    Examples:
        >>> compare(DateValue(12, 31, 2023), DateValue(1, 1, 2024))
        -1
    """
    _require_dates(left, right)
    return left.compare_to(right)


def earliest(*dates: DateValue) -> DateValue:
    """Return the earliest of the given dates.

    Raises:
        ValueError: If no dates are given.
        TypeError: If any value is not a DateValue.
    """
    if not dates:
        raise ValueError("earliest() requires at least one date")
    _require_dates(*dates)
    result = dates[0]
    for date in dates[1:]:
        if compare(date, result) < 0:
            result = date
    return result


def latest(*dates: DateValue) -> DateValue:
    """Return the latest of the given dates.

    Raises:
        ValueError: If no dates are given.
        TypeError: If any value is not a DateValue.
    """
    if not dates:
        raise ValueError("latest() requires at least one date")
    _require_dates(*dates)
    result = dates[0]
    for date in dates[1:]:
        if compare(date, result) > 0:
            result = date
    return result


__all__ = [
    "equal",
    "compare",
    "earliest",
    "latest",
]
