"""DateValue class representing a mutable calendar date.

This module provides the DateValue class: a month/day/year triple in
the proleptic Gregorian calendar that always holds a valid date and
keeps its weekday in step with the date fields.
"""

from __future__ import annotations

from datevalue._internal.calendar import (
    days_in_month,
    encode_date,
    is_leap_year,
    zeller_weekday_index,
)
from datevalue._internal.validation import validate_date
from datevalue.units.month import month_name
from datevalue.units.weekday import Weekday


class DateValue:
    """A calendar date with a derived weekday.

    DateValue stores month, day and year components and the weekday
    they fall on. Every construction and every mutation validates the
    whole triple, so an instance never holds an invalid date. The
    weekday is recomputed on each successful change and cannot be set
    directly.

    Setters validate before assigning: a rejected change raises
    InvalidDateError and leaves the instance exactly as it was.

    Instances are mutable but hashable. Do not mutate an instance while
    it is a member of a set or a key in a dict.

    Attributes:
        month: The month (1-12).
        day: The day of the month (1-31).
        year: The year (any integer).
        weekday: The Weekday this date falls on (read-only).

    Examples:
        >>> d = DateValue(1, 1, 2000)
        >>> d.weekday
        <Weekday.SATURDAY: 5>
        >>> d.month_name
        'January'
        >>> d.concatenated_date
        20000101

        >>> d.day = 31
        >>> d
        DateValue(1, 31, 2000)
    """

    __slots__ = ("_month", "_day", "_year", "_weekday")

    def __init__(self, month: int, day: int, year: int) -> None:
        """Create a DateValue from month, day and year.

        Args:
            month: The month (1-12).
            day: The day of the month.
            year: The year.

        Raises:
            InvalidDateError: If the triple is not a valid date.

        Examples:
            >>> DateValue(2, 29, 2024)
            DateValue(2, 29, 2024)

            >>> DateValue(2, 29, 2023)  # 2023 is not a leap year
            Traceback (most recent call last):
            ...
            datevalue.errors.InvalidDateError: invalid date: month=2, day=29, year=2023
        """
        self._commit(month, day, year)

    @classmethod
    def copy_of(cls, other: DateValue) -> DateValue:
        """Create an independent copy of an existing date.

        The source is already valid, so no validation is repeated and
        the cached weekday is carried over as is.

        Args:
            other: The date to copy.

        Returns:
            A new DateValue equal to other.

        Examples:
            >>> original = DateValue(5, 10, 2023)
            >>> copy = DateValue.copy_of(original)
            >>> copy.year = 2024
            >>> original.year
            2023
        """
        date = cls.__new__(cls)
        date._month = other._month
        date._day = other._day
        date._year = other._year
        date._weekday = other._weekday
        return date

    def _commit(self, month: int, day: int, year: int) -> None:
        validate_date(month, day, year)
        self._month = month
        self._day = day
        self._year = year
        self._weekday = Weekday.from_index(zeller_weekday_index(month, day, year))

    def set_month(self, month: int) -> None:
        """Change the month, keeping day and year.

        Raises:
            InvalidDateError: If the resulting date is invalid. The
                error carries the attempted month.
        """
        self._commit(month, self._day, self._year)

    def set_day(self, day: int) -> None:
        """Change the day, keeping month and year.

        Raises:
            InvalidDateError: If the resulting date is invalid. The
                error carries the attempted day.
        """
        self._commit(self._month, day, self._year)

    def set_year(self, year: int) -> None:
        """Change the year, keeping month and day.

        Raises:
            InvalidDateError: If the resulting date is invalid, as when
                moving February 29 to a non-leap year.
        """
        self._commit(self._month, self._day, year)

    @property
    def month(self) -> int:
        """Return the month component (1-12)."""
        return self._month

    @month.setter
    def month(self, value: int) -> None:
        self.set_month(value)

    @property
    def day(self) -> int:
        """Return the day of the month."""
        return self._day

    @day.setter
    def day(self, value: int) -> None:
        self.set_day(value)

    @property
    def year(self) -> int:
        """Return the year component."""
        return self._year

    @year.setter
    def year(self, value: int) -> None:
        self.set_year(value)

    @property
    def weekday(self) -> Weekday:
        """Return the day of the week this date falls on.

        Examples:
            >>> DateValue(3, 1, 2024).weekday
            <Weekday.FRIDAY: 4>
        """
        return self._weekday

    @property
    def month_name(self) -> str:
        """Return the English name of the month, e.g. 'January'."""
        return month_name(self._month)

    @property
    def concatenated_date(self) -> int:
        """Return the date encoded as a YYYYMMDD integer.

        Returns:
            The year (zero-padded to four digits) followed by the
            two-digit month and two-digit day, read as one integer.
            Negative years give a negative value.

        Examples:
            >>> DateValue(1, 15, 2024).concatenated_date
            20240115
            >>> DateValue(7, 4, 776).concatenated_date
            7760704
        """
        return encode_date(self._month, self._day, self._year)

    @property
    def is_leap_year(self) -> bool:
        """Return True if this date is in a leap year."""
        return is_leap_year(self._year)

    @property
    def days_in_month(self) -> int:
        """Return the number of days in this date's month."""
        return days_in_month(self._month, self._year)

    def to_tuple(self) -> tuple[int, int, int]:
        """Return the date as a (month, day, year) tuple."""
        return (self._month, self._day, self._year)

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 string (YYYY-MM-DD).

        Negative years are written as -YYYY-MM-DD.

        Examples:
            >>> DateValue(1, 15, 2024).to_iso_format()
            '2024-01-15'
            >>> DateValue(3, 15, -44).to_iso_format()
            '-0044-03-15'
        """
        if self._year >= 0:
            return f"{self._year:04d}-{self._month:02d}-{self._day:02d}"
        return f"{self._year:05d}-{self._month:02d}-{self._day:02d}"

    def to_long_format(self) -> str:
        """Return the date spelled out in English.

        Examples:
            >>> DateValue(1, 1, 2000).to_long_format()
            'Saturday, January 1, 2000'
        """
        return (
            f"{self._weekday.display_name}, {self.month_name} "
            f"{self._day}, {self._year}"
        )

    def compare_to(self, other: DateValue) -> int:
        """Compare this date with another, chronologically.

        Dates are ordered by year, then month, then day.

        Args:
            other: The date to compare with.

        Returns:
            -1 if this date is earlier, 0 if the dates are equal, or 1
            if this date is later.

        Raises:
            TypeError: If other is not a DateValue.

        Examples:
            >>> DateValue(5, 10, 2023).compare_to(DateValue(6, 1, 2023))
            -1
            >>> DateValue(1, 1, 2024).compare_to(DateValue(1, 1, 2024))
            0
        """
        if not isinstance(other, DateValue):
            raise TypeError(
                f"cannot compare DateValue with {type(other).__name__}"
            )
        left = self._sort_key()
        right = other._sort_key()
        if left == right:
            return 0
        return 1 if left > right else -1

    def _sort_key(self) -> tuple[int, int, int]:
        return (self._year, self._month, self._day)

    def __copy__(self) -> DateValue:
        return DateValue.copy_of(self)

    def __eq__(self, other: object) -> bool:
        """Check equality with another date.

        Only month, day and year are compared; the weekday follows from
        them.

        Examples:
            >>> DateValue(1, 15, 2024) == DateValue(1, 15, 2024)
            True
            >>> DateValue(1, 15, 2024) == DateValue(1, 16, 2024)
            False
        """
        if not isinstance(other, DateValue):
            return NotImplemented
        return (
            self._month == other._month
            and self._day == other._day
            and self._year == other._year
        )

    def __ne__(self, other: object) -> bool:
        """Check inequality with another date."""
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __lt__(self, other: object) -> bool:
        """Check if this date is earlier than another."""
        if not isinstance(other, DateValue):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        """Check if this date is earlier than or equal to another."""
        if not isinstance(other, DateValue):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        """Check if this date is later than another."""
        if not isinstance(other, DateValue):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        """Check if this date is later than or equal to another."""
        if not isinstance(other, DateValue):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __hash__(self) -> int:
        """Return a hash based on the YYYYMMDD encoding."""
        return hash(self.concatenated_date)

    def __repr__(self) -> str:
        """Return a string like 'DateValue(1, 15, 2024)'."""
        return f"DateValue({self._month}, {self._day}, {self._year})"

    def __str__(self) -> str:
        """Return the ISO 8601 representation."""
        return self.to_iso_format()


__all__ = ["DateValue"]
