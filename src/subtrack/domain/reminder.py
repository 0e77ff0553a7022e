"""Reminder domain service."""

from datetime import date
from typing import Optional

from subtrack.database.base import Database
from subtrack.domain.entities import Subscription
from subtrack.domain.recurrence import is_reminder_due, next_payment_date


class ReminderService:
    """Service answering which subscriptions need a reminder today."""

    def __init__(self, db: Database):
        """Initialize reminder service.

        Args:
            db: Database instance
        """
        self.db = db

    def due_reminders(self, today: Optional[date] = None) -> list[Subscription]:
        """Active subscriptions with a reminder falling on ``today``."""
        today = today or date.today()
        return [
            subscription
            for subscription in self.db.list_subscriptions(active_only=True)
            if is_reminder_due(subscription, today)
        ]

    def next_payment(self, subscription: Subscription, today: Optional[date] = None) -> date:
        """Next payment date a reminder refers to."""
        return next_payment_date(subscription.recurrence.day_of_month, today or date.today())
