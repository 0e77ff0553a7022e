"""Tests for ReminderService."""

from datetime import date

from subtrack.domain.reminder import ReminderService


def test_due_reminders_on_day_before(temp_db, sample_subscriptions):
    """Rent is paid on the 1st, so its default reminder falls on the last day."""
    service = ReminderService(temp_db)

    due = service.due_reminders(date(2024, 4, 30))

    # The card has no day of month, which counts as the 1st
    assert [s.name for s in due] == ["Visa Card", "Rent"]
    assert service.next_payment(due[1], date(2024, 4, 30)) == date(2024, 5, 1)


def test_short_month_reminder(temp_db, sample_subscriptions):
    """Netflix on day 31 is paid April 30, so the reminder is April 29."""
    service = ReminderService(temp_db)

    assert [s.name for s in service.due_reminders(date(2024, 4, 29))] == ["Netflix"]


def test_inactive_subscriptions_are_not_reminded(temp_db, sample_subscriptions, subscription_service):
    subscription_service.toggle_active(sample_subscriptions["Visa Card"].id)
    subscription_service.toggle_active(sample_subscriptions["Rent"].id)

    assert ReminderService(temp_db).due_reminders(date(2024, 4, 30)) == []


def test_no_reminders_due(temp_db, sample_subscriptions):
    assert ReminderService(temp_db).due_reminders(date(2024, 4, 20)) == []
