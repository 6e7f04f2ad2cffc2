"""Calendar utilities for datevalue.

This module provides internal functions for calendar calculations:
leap year logic, month lengths, date validity, weekday derivation via
Zeller's congruence, and the YYYYMMDD integer encoding.

All rules are those of the proleptic Gregorian calendar.

This module is not part of the public API.
"""

from __future__ import annotations

from datevalue._internal.constants import (
    DAYS_IN_MONTH,
    DAYS_PER_WEEK,
    MONTHS_PER_YEAR,
    ZELLER_MONDAY_OFFSET,
)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    A year is a leap year if:
    - Divisible by 4, AND
    - NOT divisible by 100, unless also divisible by 400

    Args:
        year: The year to check (can be zero or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)  # Divisible by 4 but not 100
        True
        >>> is_leap_year(2023)  # Not divisible by 4
        False
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(month: int, year: int) -> int:
    """Return the number of days in a given month.

    Args:
        month: The month (1-12).
        year: The year (needed for February in leap years).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def is_valid_date(month: int, day: int, year: int) -> bool:
    """Check whether month, day and year form a valid calendar date.

    Args:
        month: The month to check.
        day: The day of the month to check.
        year: The year (any integer).

    Returns:
        True if the triple is a valid date, False otherwise.

    Examples:
        >>> is_valid_date(2, 29, 2024)
        True
        >>> is_valid_date(2, 29, 2023)
        False
        >>> is_valid_date(13, 1, 2024)
        False
    """
    if month < 1 or month > MONTHS_PER_YEAR:
        return False
    return 1 <= day <= days_in_month(month, year)


def zeller_weekday_index(month: int, day: int, year: int) -> int:
    """Compute the day of the week with Zeller's congruence.

    January and February are treated as months 13 and 14 of the
    previous year. The raw congruence counts from Saturday, so the
    result is shifted to count from Monday.

    The date is assumed to be valid; no checks are performed.

    Args:
        month: The month (1-12).
        day: The day of the month.
        year: The year.

    Returns:
        Day of week (0=Monday, 6=Sunday).

    Examples:
        >>> zeller_weekday_index(1, 1, 2000)  # Saturday
        5
        >>> zeller_weekday_index(1, 1, 1900)  # Monday
        0
    """
    if month <= 2:
        calc_month = month + MONTHS_PER_YEAR
        calc_year = year - 1
    else:
        calc_month = month
        calc_year = year

    # Python's floor division keeps this exact for years <= 0 too
    return (
        day
        + (13 * (calc_month + 1)) // 5
        + calc_year
        + calc_year // 4
        - calc_year // 100
        + calc_year // 400
        + ZELLER_MONDAY_OFFSET
    ) % DAYS_PER_WEEK


def encode_date(month: int, day: int, year: int) -> int:
    """Encode a date as a YYYYMMDD integer.

    The year is zero-padded to at least four digits and the month and
    day to two digits each. Negative years keep their sign, so the
    encoding of a negative year is the negated encoding of its
    absolute value.

    Args:
        month: The month (1-12).
        day: The day of the month.
        year: The year.

    Returns:
        The encoded date.

    Examples:
        >>> encode_date(1, 15, 2024)
        20240115
        >>> encode_date(3, 15, 44)
        440315
        >>> encode_date(3, 15, -44)
        -440315
    """
    sign = "-" if year < 0 else ""
    return int(f"{sign}{abs(year):04d}{month:02d}{day:02d}")


__all__ = [
    "is_leap_year",
    "days_in_month",
    "is_valid_date",
    "zeller_weekday_index",
    "encode_date",
]
