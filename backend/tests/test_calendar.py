"""Тесты разворачивания периода в дни."""

from datetime import date, datetime

import pytest

from shiftflow.services.calendar import expand_days, to_day


class TestExpandDays:

    def test_single_day(self):
        assert expand_days(date(2024, 1, 1), date(2024, 1, 1)) == [date(2024, 1, 1)]

    def test_reversed_range_is_empty(self):
        assert expand_days(date(2024, 1, 2), date(2024, 1, 1)) == []

    def test_inclusive_and_ascending(self):
        days = expand_days(date(2024, 1, 30), date(2024, 2, 2))
        assert days == [
            date(2024, 1, 30),
            date(2024, 1, 31),
            date(2024, 2, 1),
            date(2024, 2, 2),
        ]

    def test_leap_day(self):
        days = expand_days(date(2024, 2, 28), date(2024, 3, 1))
        assert date(2024, 2, 29) in days
        assert len(days) == 3

    def test_accepts_iso_strings(self):
        assert len(expand_days("2024-01-01", "2024-01-07")) == 7


class TestToDay:

    def test_date_passthrough(self):
        assert to_day(date(2024, 5, 6)) == date(2024, 5, 6)

    def test_datetime_drops_time(self):
        assert to_day(datetime(2024, 5, 6, 23, 59)) == date(2024, 5, 6)

    def test_string_truncated_to_day(self):
        assert to_day("2024-05-06T18:30:00.000Z") == date(2024, 5, 6)

    def test_invalid_string(self):
        with pytest.raises(ValueError):
            to_day("not-a-date")

    def test_invalid_type(self):
        with pytest.raises(TypeError):
            to_day(20240506)
