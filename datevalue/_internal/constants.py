"""Internal constants for datevalue.

These constants define the lookup tables and magic numbers used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

MONTHS_PER_YEAR: int = 12
DAYS_PER_WEEK: int = 7

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Shifts Zeller's congruence (Saturday=0) onto Monday=0
ZELLER_MONDAY_OFFSET: int = 5


__all__ = [
    "MONTHS_PER_YEAR",
    "DAYS_PER_WEEK",
    "DAYS_IN_MONTH",
    "MONTH_NAMES",
    "WEEKDAY_NAMES",
    "ZELLER_MONDAY_OFFSET",
]
