"""Tests for recurrence normalization and reminder checks."""

from datetime import date

import pytest

from subtrack.domain.recurrence import (
    clamp_day,
    days_in_month,
    is_reminder_due,
    next_payment_date,
    normalize_day,
)


class TestNormalizeDay:
    """Tests for normalize_day."""

    def test_leap_february_clamps_to_29(self):
        assert normalize_day(2024, 2, 31) == 29

    def test_common_february_clamps_to_28(self):
        assert normalize_day(2023, 2, 31) == 28

    def test_thirty_day_month_clamps_to_30(self):
        assert normalize_day(2024, 4, 31) == 30

    def test_day_that_exists_is_unchanged(self):
        assert normalize_day(2024, 3, 31) == 31
        assert normalize_day(2024, 2, 15) == 15

    @pytest.mark.parametrize("nominal,expected", [(0, 1), (-5, 1), (40, 31)])
    def test_out_of_range_days_are_clamped(self, nominal, expected):
        assert normalize_day(2024, 1, nominal) == expected

    def test_century_years(self):
        assert days_in_month(1900, 2) == 28
        assert days_in_month(2000, 2) == 29


def test_clamp_day_bounds():
    assert clamp_day(1) == 1
    assert clamp_day(31) == 31
    assert clamp_day(32) == 31
    assert clamp_day(0) == 1


class TestNextPaymentDate:
    """Tests for next_payment_date."""

    def test_later_this_month(self):
        assert next_payment_date(20, date(2024, 3, 10)) == date(2024, 3, 20)

    def test_today_counts(self):
        assert next_payment_date(10, date(2024, 3, 10)) == date(2024, 3, 10)

    def test_rolls_to_next_month_when_past(self):
        assert next_payment_date(5, date(2024, 3, 10)) == date(2024, 4, 5)

    def test_rolls_over_year_end(self):
        assert next_payment_date(1, date(2024, 12, 15)) == date(2025, 1, 1)

    def test_clamps_in_short_month(self):
        assert next_payment_date(31, date(2024, 4, 2)) == date(2024, 4, 30)

    def test_missing_day_defaults_to_first(self):
        assert next_payment_date(None, date(2024, 3, 1)) == date(2024, 3, 1)


class TestIsReminderDue:
    """Tests for is_reminder_due."""

    def test_reminder_one_day_before(self, make_subscription):
        sub = make_subscription(day_of_month=15, reminders=(1,))
        assert is_reminder_due(sub, date(2024, 3, 14)) is True
        assert is_reminder_due(sub, date(2024, 3, 13)) is False

    def test_same_day_reminder(self, make_subscription):
        sub = make_subscription(day_of_month=15, reminders=(0,))
        assert is_reminder_due(sub, date(2024, 3, 15)) is True

    def test_any_of_several_reminders(self, make_subscription):
        sub = make_subscription(day_of_month=15, reminders=(7, 3))
        assert is_reminder_due(sub, date(2024, 3, 8)) is True
        assert is_reminder_due(sub, date(2024, 3, 12)) is True
        assert is_reminder_due(sub, date(2024, 3, 14)) is False

    def test_reminder_across_month_boundary(self, make_subscription):
        sub = make_subscription(day_of_month=1, reminders=(2,))
        assert is_reminder_due(sub, date(2024, 1, 30)) is True

    def test_no_reminders(self, make_subscription):
        sub = make_subscription(day_of_month=15, reminders=())
        assert is_reminder_due(sub, date(2024, 3, 15)) is False
