"""Event projection: turn subscriptions into dated calendar events."""

import logging
from datetime import MAXYEAR, MINYEAR, date, timedelta
from typing import Iterable, Iterator, Optional, Sequence

from subtrack.database.base import Database
from subtrack.domain.entities import (
    CardSchedule,
    DayEvents,
    EventKind,
    FilterSpec,
    MonthlySchedule,
    Subscription,
    SubscriptionEvent,
)
from subtrack.domain.filters import filter_events
from subtrack.domain.recurrence import MIN_DAY, occurrence_in_month

logger = logging.getLogger(__name__)

KIND_ORDER = {kind: index for index, kind in enumerate(EventKind)}

GRID_DAYS = 42


def event_id(subscription_id: str, kind: EventKind, day: date) -> str:
    """Deterministic event ID from subscription, kind and date."""
    return f"{subscription_id}-{kind.value}-{day.isoformat()}"


def event_sort_key(event: SubscriptionEvent) -> tuple:
    """Canonical event order: subscription order first, then date and kind."""
    return (event.sort_order, event.subscription_id, event.date, KIND_ORDER[event.kind])


def iter_months(window_start: date, window_end: date) -> Iterator[tuple[int, int]]:
    """Yield (year, month) from the month before the window to the month after it."""
    first = window_start.year * 12 + window_start.month - 1 - 1
    last = window_end.year * 12 + window_end.month - 1 + 1
    # The lookaround months do not exist next to date.min and date.max
    first = max(first, MINYEAR * 12)
    last = min(last, MAXYEAR * 12 + 11)
    for index in range(first, last + 1):
        yield index // 12, index % 12 + 1


def _make_event(
    subscription: Subscription, kind: EventKind, day: date, title: str
) -> SubscriptionEvent:
    return SubscriptionEvent(
        id=event_id(subscription.id, kind, day),
        subscription_id=subscription.id,
        date=day,
        kind=kind,
        title=title,
        category=subscription.category,
        amount=subscription.amount,
        currency=subscription.currency,
        sort_order=subscription.sort_order,
    )


def _monthly_occurrences(
    nominal_day: int, window_start: date, window_end: date
) -> Iterator[date]:
    for year, month in iter_months(window_start, window_end):
        day = occurrence_in_month(year, month, nominal_day)
        if window_start <= day <= window_end:
            yield day


def project_subscription(
    subscription: Subscription, window_start: date, window_end: date
) -> list[SubscriptionEvent]:
    """Project a single subscription into the inclusive window."""
    schedule = subscription.schedule
    events: list[SubscriptionEvent] = []

    if isinstance(schedule, CardSchedule):
        card_days = (
            (EventKind.STATEMENT, schedule.statement_day, f"{subscription.name} - Statement"),
            (EventKind.DUE, schedule.due_day, f"{subscription.name} - Due"),
        )
        for kind, nominal_day, title in card_days:
            if not nominal_day:
                continue
            for day in _monthly_occurrences(nominal_day, window_start, window_end):
                events.append(_make_event(subscription, kind, day, title))
    elif isinstance(schedule, MonthlySchedule):
        nominal_day = schedule.day_of_month or MIN_DAY
        for day in _monthly_occurrences(nominal_day, window_start, window_end):
            events.append(
                _make_event(subscription, EventKind.PAYMENT, day, subscription.name)
            )
    else:
        raise TypeError(f"Unsupported schedule: {schedule!r}")

    return events


def project_events(
    subscriptions: Iterable[Subscription], window_start: date, window_end: date
) -> list[SubscriptionEvent]:
    """Project active subscriptions into events within [window_start, window_end].

    Inactive subscriptions produce no events. Records missing required fields
    are skipped with a warning so that one bad record does not hide the rest.

    Args:
        subscriptions: Subscriptions to project
        window_start: First day of the window (inclusive)
        window_end: Last day of the window (inclusive)

    Returns:
        Events sorted by subscription sort order, subscription ID, date and kind
    """
    if window_start > window_end:
        return []

    events: list[SubscriptionEvent] = []
    for subscription in subscriptions:
        if not subscription.is_well_formed():
            logger.warning(
                "Skipping malformed subscription %r during projection",
                getattr(subscription, "id", None),
            )
            continue
        if not subscription.is_active:
            continue
        events.extend(project_subscription(subscription, window_start, window_end))

    return sorted(events, key=event_sort_key)


def group_events_by_day(
    events: Sequence[SubscriptionEvent], window_start: date, window_end: date
) -> list[DayEvents]:
    """Group events into one entry per day of the window, keeping event order."""
    by_day: dict[date, list[SubscriptionEvent]] = {}
    for event in events:
        by_day.setdefault(event.date, []).append(event)

    days = []
    for offset in range((window_end - window_start).days + 1):
        current = window_start + timedelta(days=offset)
        days.append(DayEvents(date=current, events=tuple(by_day.get(current, ()))))
    return days


def month_grid_window(year: int, month: int) -> tuple[date, date]:
    """Monday-start, six-week calendar grid that contains the given month."""
    month_start = date(year, month, 1)
    grid_start = month_start - timedelta(days=month_start.weekday())
    return grid_start, grid_start + timedelta(days=GRID_DAYS - 1)


class CalendarService:
    """Service for projecting stored subscriptions onto a calendar."""

    def __init__(self, db: Database):
        """Initialize calendar service.

        Args:
            db: Database instance
        """
        self.db = db

    def project_window(self, window_start: date, window_end: date) -> list[SubscriptionEvent]:
        """Project all active subscriptions into the window."""
        subscriptions = self.db.list_subscriptions(active_only=True)
        return project_events(subscriptions, window_start, window_end)

    def calendar_days(
        self,
        window_start: date,
        window_end: date,
        spec: Optional[FilterSpec] = None,
        today: Optional[date] = None,
    ) -> list[DayEvents]:
        """Projected, filtered events grouped by day."""
        events = self.project_window(window_start, window_end)
        if spec is not None:
            events = filter_events(events, spec, today=today)
        return group_events_by_day(events, window_start, window_end)
