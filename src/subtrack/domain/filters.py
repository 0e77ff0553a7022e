"""Event filter pipeline.

Every filter dimension is an independent predicate; a spec is the AND of its
predicates and several specs are the AND of all of them.
"""

from datetime import date, timedelta
from typing import Callable, Iterable, Optional

from subtrack.domain.entities import EventKind, FilterSpec, SubscriptionEvent

EventPredicate = Callable[[SubscriptionEvent], bool]

PAYMENT_KINDS = frozenset({EventKind.PAYMENT, EventKind.DUE})


def category_predicate(spec: FilterSpec) -> Optional[EventPredicate]:
    if not spec.categories:
        return None
    categories = spec.categories
    return lambda event: event.category in categories


def horizon_predicate(spec: FilterSpec, today: date) -> Optional[EventPredicate]:
    if spec.upcoming_days is None:
        return None
    cutoff = today + timedelta(days=spec.upcoming_days)
    return lambda event: event.date <= cutoff


def payments_only_predicate(spec: FilterSpec) -> Optional[EventPredicate]:
    if not spec.payments_only:
        return None
    return lambda event: event.kind in PAYMENT_KINDS


def search_predicate(spec: FilterSpec) -> Optional[EventPredicate]:
    if not spec.search_text:
        return None
    needle = spec.search_text.lower()
    return lambda event: needle in event.title.lower()


def spec_predicates(spec: FilterSpec, today: date) -> list[EventPredicate]:
    """Active predicates of a filter spec; an all-default spec has none."""
    candidates = (
        category_predicate(spec),
        horizon_predicate(spec, today),
        payments_only_predicate(spec),
        search_predicate(spec),
    )
    return [predicate for predicate in candidates if predicate is not None]


def filter_events(
    events: Iterable[SubscriptionEvent],
    *specs: FilterSpec,
    today: Optional[date] = None,
) -> list[SubscriptionEvent]:
    """Keep events that satisfy every predicate of every spec.

    Input order is preserved, so events grouped or sorted by date stay that way.

    Args:
        events: Projected events
        specs: One or more filter specs, combined with AND
        today: Reference date for the upcoming-days horizon (defaults to today)

    Returns:
        Filtered list of events
    """
    today = today or date.today()
    predicates: list[EventPredicate] = []
    for spec in specs:
        predicates.extend(spec_predicates(spec, today))
    return [event for event in events if all(predicate(event) for predicate in predicates)]
