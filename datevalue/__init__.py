"""Datevalue: a validated calendar date value type.

Datevalue provides a single mutable date type that always holds a valid
proleptic Gregorian date and keeps its day of the week in step with it.

Core Types:
    DateValue: Calendar date (month, day, year) with a derived weekday

Units:
    Weekday: Day of week (MONDAY=0 .. SUNDAY=6)
    Month: Month of year (JANUARY=1 .. DECEMBER=12)

Functions:
    is_valid_date: Check a month/day/year triple
    is_leap_year: Gregorian leap year rule
    month_name: English name of a 1-based month

Exceptions:
    DateValueError: Base exception
    InvalidDateError: Invalid month/day/year triple

Example:
    >>> from datevalue import DateValue
    >>> d = DateValue(3, 1, 2024)
    >>> d.weekday.display_name
    'Friday'
    >>> d.month = 2
    >>> d.to_long_format()
    'Thursday, February 1, 2024'
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from datevalue.core.date import DateValue

# Units
from datevalue.units.month import Month, month_name
from datevalue.units.weekday import Weekday

# Calendar rules
from datevalue._internal.calendar import is_leap_year, is_valid_date

# Exceptions
from datevalue.errors import DateValueError, InvalidDateError

__all__: list[str] = [
    "__version__",
    # Core types
    "DateValue",
    # Units
    "Month",
    "Weekday",
    "month_name",
    # Calendar rules
    "is_leap_year",
    "is_valid_date",
    # Exceptions
    "DateValueError",
    "InvalidDateError",
]
