"""Tests for utility functions."""

from datetime import date, datetime

import pytest

from pcos_companion.utils.dates import calendar_day, date_sort_key, in_range


class TestCalendarDay:
    """Tests for calendar_day function."""

    def test_plain_day(self):
        """Test a bare ISO day."""
        assert calendar_day("2024-01-05") == date(2024, 1, 5)

    def test_time_is_dropped(self):
        """Test a timestamp is reduced to its day."""
        assert calendar_day("2024-01-05T23:59:00") == date(2024, 1, 5)
        assert calendar_day("2024-01-05T08:00:00Z") == date(2024, 1, 5)

    def test_date_and_datetime_objects(self):
        """Test date and datetime inputs."""
        assert calendar_day(date(2024, 1, 5)) == date(2024, 1, 5)
        assert calendar_day(datetime(2024, 1, 5, 12)) == date(2024, 1, 5)

    def test_invalid_string(self):
        """Test garbage raises ValueError."""
        with pytest.raises(ValueError):
            calendar_day("not-a-day")


class TestDateSortKey:
    """Tests for date_sort_key function."""

    def test_orders_days_and_times(self):
        """Test times sort after the bare day."""
        values = ["2024-01-05T10:00:00", "2024-01-04", "2024-01-05"]
        assert sorted(values, key=date_sort_key) == [
            "2024-01-04",
            "2024-01-05",
            "2024-01-05T10:00:00",
        ]


class TestInRange:
    """Tests for in_range function."""

    def test_inclusive_bounds(self):
        """Test both bounds are included."""
        assert in_range("2024-01-01", "2024-01-01", "2024-01-31")
        assert in_range("2024-01-31", "2024-01-01", "2024-01-31")

    def test_outside(self):
        """Test days outside the range."""
        assert not in_range("2023-12-31", "2024-01-01", "2024-01-31")
        assert not in_range("2024-02-01", date(2024, 1, 1), date(2024, 1, 31))

    def test_time_on_end_day(self):
        """Test a time on the end day is still inside."""
        assert in_range("2024-01-31T22:00:00", "2024-01-01", "2024-01-31")


class TestUtcOffsets:
    """Tests that offsets are ignored in favour of the written wall-clock time."""

    def test_sort_uses_wall_clock(self):
        """Test an offset does not shift the sort position."""
        values = ["2024-01-05T09:00:00+05:00", "2024-01-05T08:00:00+00:00"]
        assert sorted(values, key=date_sort_key) == [
            "2024-01-05T08:00:00+00:00",
            "2024-01-05T09:00:00+05:00",
        ]

    def test_day_is_as_written(self):
        """Test a late time with a negative offset stays on its written day."""
        assert calendar_day("2024-01-05T23:30:00-05:00") == date(2024, 1, 5)
        assert in_range("2024-01-05T23:30:00-05:00", "2024-01-05", "2024-01-05")

    def test_aware_and_naive_keys_compare(self):
        """Test aware and naive values can be sorted together."""
        values = ["2024-01-05T10:00:00Z", "2024-01-05T09:00:00", "2024-01-04"]
        assert sorted(values, key=date_sort_key) == [
            "2024-01-04",
            "2024-01-05T09:00:00",
            "2024-01-05T10:00:00Z",
        ]
