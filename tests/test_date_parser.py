"""Tests for date parsing utilities."""

from datetime import date

import pytest

from subtrack.utils.date_parser import get_date_range, parse_date, parse_month

TODAY = date(2024, 3, 10)


class TestParseDate:
    """Tests for parse_date."""

    def test_iso_date(self):
        assert parse_date("2024-01-15") == date(2024, 1, 15)

    def test_written_date(self):
        assert parse_date("January 15, 2024") == date(2024, 1, 15)

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("today", date(2024, 3, 10)),
            ("Yesterday", date(2024, 3, 9)),
            ("tomorrow", date(2024, 3, 11)),
            ("this month", date(2024, 3, 1)),
            ("next month", date(2024, 4, 1)),
            ("last month", date(2024, 2, 1)),
            ("this year", date(2024, 1, 1)),
            ("next year", date(2025, 1, 1)),
            ("last year", date(2023, 1, 1)),
        ],
    )
    def test_relative_dates(self, text, expected):
        assert parse_date(text, today=TODAY) == expected

    def test_invalid_date(self):
        with pytest.raises(ValueError, match="Could not parse date"):
            parse_date("not a date")


class TestParseMonth:
    """Tests for parse_month."""

    def test_leap_february(self):
        assert parse_month("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))

    def test_december(self):
        assert parse_month("2023-12") == (date(2023, 12, 1), date(2023, 12, 31))

    @pytest.mark.parametrize("text", ["2024", "2024-00", "2024-13", "march", "2024-3-1"])
    def test_invalid(self, text):
        with pytest.raises(ValueError):
            parse_month(text)


class TestGetDateRange:
    """Tests for get_date_range."""

    def test_this_month(self):
        assert get_date_range("this-month", today=TODAY) == (date(2024, 3, 1), date(2024, 3, 31))

    def test_next_month_over_year_end(self):
        assert get_date_range("next-month", today=date(2024, 12, 31)) == (
            date(2025, 1, 1),
            date(2025, 1, 31),
        )

    def test_last_month(self):
        assert get_date_range("last-month", today=TODAY) == (date(2024, 2, 1), date(2024, 2, 29))

    def test_this_year(self):
        assert get_date_range("this-year", today=TODAY) == (date(2024, 1, 1), date(2024, 12, 31))

    def test_next_30_days(self):
        assert get_date_range("next-30-days", today=TODAY) == (date(2024, 3, 10), date(2024, 4, 9))

    def test_unknown_period(self):
        with pytest.raises(ValueError, match="Unknown period"):
            get_date_range("fortnight", today=TODAY)
