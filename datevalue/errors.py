"""Datevalue exception hierarchy.

All datevalue-specific exceptions inherit from DateValueError.
"""

from __future__ import annotations


class DateValueError(Exception):
    """Base exception for all datevalue errors."""

    pass


class InvalidDateError(DateValueError):
    """A month/day/year triple that is not a valid Gregorian date.

    Raised by DateValue construction and by every setter whose
    resulting triple fails validation. The offending values are kept
    on the exception so callers can report or correct them.

    Examples:
        - Month value outside 1-12
        - Day value outside the valid range for the month
        - February 29 in a non-leap year

    Attributes:
        month: The rejected month.
        day: The rejected day.
        year: The rejected year.
    """

    def __init__(self, month: int, day: int, year: int) -> None:
        super().__init__(f"invalid date: month={month}, day={day}, year={year}")
        self.month = month
        self.day = day
        self.year = year


__all__ = [
    "DateValueError",
    "InvalidDateError",
]
