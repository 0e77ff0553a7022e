"""Recurrence normalization and reminder checks.

Months are 1-based everywhere in subtrack, matching ``datetime.date``.
"""

import calendar
from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from subtrack.domain.entities import Subscription

MIN_DAY = 1
MAX_DAY = 31


def clamp_day(value: int) -> int:
    """Clamp a nominal day into the 1-31 range."""
    return min(max(int(value), MIN_DAY), MAX_DAY)


def days_in_month(year: int, month: int) -> int:
    """Number of days in a month, leap years included."""
    return calendar.monthrange(year, month)[1]


def normalize_day(year: int, month: int, nominal_day: int) -> int:
    """Actual calendar day for a nominal day-of-month.

    Days past the end of a short month fall back to its last day, so day 31
    becomes April 30 and February 28 or 29.

    Args:
        year: Calendar year
        month: Month number (1-12)
        nominal_day: Requested day of month

    Returns:
        Day of month that exists in the given month
    """
    return min(clamp_day(nominal_day), days_in_month(year, month))


def occurrence_in_month(year: int, month: int, nominal_day: int) -> date:
    """Date of a day-of-month occurrence in the given month."""
    return date(year, month, normalize_day(year, month, nominal_day))


def next_payment_date(day_of_month: Optional[int], today: date) -> date:
    """Next payment on or after ``today`` for a monthly day rule.

    A missing day of month is treated as the 1st.
    """
    nominal = day_of_month or MIN_DAY
    candidate = occurrence_in_month(today.year, today.month, nominal)
    if candidate < today:
        following = today.replace(day=1) + relativedelta(months=1)
        candidate = occurrence_in_month(following.year, following.month, nominal)
    return candidate


def is_reminder_due(subscription: Subscription, today: Optional[date] = None) -> bool:
    """Whether one of the subscription's reminders falls on ``today``.

    Each reminder is a number of days before the next payment date derived
    from ``recurrence.day_of_month``. Zero means the payment day itself.
    """
    if not subscription.reminders:
        return False

    today = today or date.today()
    payment_date = next_payment_date(subscription.recurrence.day_of_month, today)
    return any(
        payment_date - timedelta(days=days_before) == today
        for days_before in subscription.reminders
    )
