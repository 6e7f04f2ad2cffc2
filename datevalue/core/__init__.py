"""Core value types.

This module provides:
    - DateValue: Mutable calendar date with a derived weekday
"""

from __future__ import annotations

from datevalue.core.date import DateValue

__all__: list[str] = [
    "DateValue",
]
