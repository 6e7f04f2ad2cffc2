"""Month enumeration and name lookup."""

from __future__ import annotations

from enum import Enum

from datevalue._internal.constants import MONTH_NAMES


class Month(Enum):
    """Month of the year, numbered January=1 through December=12.

    Examples:
        >>> Month(3).display_name
        'March'
    """

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @property
    def display_name(self) -> str:
        """Return the English name, e.g. 'January'."""
        return MONTH_NAMES[self.value - 1]


def month_name(month: int) -> str:
    """Return the English name of a 1-based month number.

    Args:
        month: The month (1-12).

    Returns:
        The month name, from "January" to "December".

    Raises:
        ValueError: If month is not in 1-12.

    Examples:
        >>> month_name(1)
        'January'
        >>> month_name(12)
        'December'
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")
    return MONTH_NAMES[month - 1]


__all__ = [
    "Month",
    "month_name",
]
