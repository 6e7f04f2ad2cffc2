"""Internal utilities for datevalue.

This module contains private implementation details:
    - Calendar rules (leap years, month lengths, Zeller's congruence)
    - Constants and lookup tables
    - Date validation

Note: This module is not part of the public API.
"""

from __future__ import annotations

from datevalue._internal.calendar import (
    days_in_month,
    encode_date,
    is_leap_year,
    is_valid_date,
    zeller_weekday_index,
)
from datevalue._internal.validation import validate_date

__all__: list[str] = [
    "days_in_month",
    "encode_date",
    "is_leap_year",
    "is_valid_date",
    "validate_date",
    "zeller_weekday_index",
]
