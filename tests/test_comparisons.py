"""Tests for the functional comparison API."""

from __future__ import annotations

import pytest

from datevalue.comparisons import compare, earliest, equal, latest
from datevalue.core.date import DateValue


class TestEqual:
    """Tests for equal()."""

    def test_same_date(self) -> None:
        assert equal(DateValue(1, 15, 2024), DateValue(1, 15, 2024))

    def test_different_date(self) -> None:
        assert not equal(DateValue(1, 15, 2024), DateValue(1, 16, 2024))

    def test_different_types(self) -> None:
        assert not equal(DateValue(1, 15, 2024), 20240115)  # type: ignore[arg-type]

    def test_both_foreign_types(self) -> None:
        with pytest.raises(TypeError, match="expected DateValue, got int"):
            equal(1, 1)  # type: ignore[arg-type]


class TestCompare:
    """Tests for compare()."""

    def test_three_way(self) -> None:
        a = DateValue(5, 10, 2023)
        b = DateValue(6, 1, 2023)
        assert compare(a, b) == -1
        assert compare(b, a) == 1
        assert compare(a, DateValue(5, 10, 2023)) == 0

    def test_rejects_foreign_type(self) -> None:
        with pytest.raises(TypeError):
            compare(DateValue(5, 10, 2023), "2023-05-10")  # type: ignore[arg-type]


class TestEarliestLatest:
    """Tests for earliest() and latest()."""

    def test_earliest(self) -> None:
        dates = [DateValue(1, 1, 2024), DateValue(5, 10, 2023), DateValue(6, 1, 2023)]
        assert earliest(*dates) == DateValue(5, 10, 2023)

    def test_latest(self) -> None:
        dates = [DateValue(5, 10, 2023), DateValue(1, 1, 2024), DateValue(6, 1, 2023)]
        assert latest(*dates) == DateValue(1, 1, 2024)

    def test_single_date(self) -> None:
        d = DateValue(2, 29, 2024)
        assert earliest(d) is d
        assert latest(d) is d

    def test_empty(self) -> None:
        with pytest.raises(ValueError, match="requires at least one date"):
            earliest()
        with pytest.raises(ValueError, match="requires at least one date"):
            latest()

    def test_rejects_foreign_type(self) -> None:
        with pytest.raises(TypeError):
            latest(DateValue(1, 1, 2024), None)  # type: ignore[arg-type]
