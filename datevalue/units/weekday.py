"""Weekday enumeration.

This module provides the Weekday enum, numbered Monday=0 through
Sunday=6 to match Python's datetime.date.weekday() convention.
"""

from __future__ import annotations

from enum import Enum

from datevalue._internal.constants import WEEKDAY_NAMES


class Weekday(Enum):
    """Day of the week.

    Examples:
        >>> Weekday.SATURDAY.display_name
        'Saturday'
        >>> Weekday.from_index(0)
        <Weekday.MONDAY: 0>
        >>> Weekday.SUNDAY.is_weekend
        True
    """

    MONDAY = 0
    TUESDAY = 1
    WEDNESDAY = 2
    THURSDAY = 3
    FRIDAY = 4
    SATURDAY = 5
    SUNDAY = 6

    @classmethod
    def from_index(cls, index: int) -> Weekday:
        """Return the weekday for a Monday-based index.

        Args:
            index: Day of week (0=Monday, 6=Sunday).

        Returns:
            The matching Weekday.

        Raises:
            ValueError: If index is not in 0-6.
        """
        if index < 0 or index > 6:
            raise ValueError(f"weekday index must be 0-6, got {index}")
        return cls(index)

    @property
    def display_name(self) -> str:
        """Return the English name, e.g. 'Monday'."""
        return WEEKDAY_NAMES[self.value]

    @property
    def is_weekend(self) -> bool:
        """Return True for Saturday and Sunday."""
        return self in (Weekday.SATURDAY, Weekday.SUNDAY)


__all__ = ["Weekday"]
