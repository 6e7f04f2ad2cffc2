"""Calendar units and enumerations.

This module provides:
    - Weekday: Day of week enum (MONDAY=0 .. SUNDAY=6)
    - Month: Month of year enum (JANUARY=1 .. DECEMBER=12)
    - month_name: English month name lookup
"""

from __future__ import annotations

from datevalue.units.month import Month, month_name
from datevalue.units.weekday import Weekday

__all__: list[str] = [
    "Month",
    "Weekday",
    "month_name",
]
