"""Explicit ordering of subscriptions.

Subscriptions carry an integer ``sort_order``. Ties are broken by ID so that
every listing and every projection sees the same order.
"""

from enum import Enum
from typing import Iterable, Sequence

from subtrack.domain.entities import Subscription
from subtrack.domain.errors import NotFoundError, reorder_target_not_found, subscription_not_found


class ReorderPosition(str, Enum):
    """Where to place a moved subscription relative to its target."""

    BEFORE = "before"
    AFTER = "after"


def sort_key(subscription: Subscription) -> tuple[int, str]:
    """Sort key for subscription display order."""
    return (subscription.sort_order, subscription.id)


def order_subscriptions(subscriptions: Iterable[Subscription]) -> list[Subscription]:
    """Subscriptions in display order."""
    return sorted(subscriptions, key=sort_key)


def move(
    ordered_ids: Sequence[str],
    moving_id: str,
    target_id: str,
    position: ReorderPosition,
) -> list[str]:
    """Move one ID directly before or after another.

    All other IDs keep their relative order. Moving an ID relative to itself
    returns the ordering unchanged.

    Args:
        ordered_ids: Current ordering
        moving_id: ID to move
        target_id: ID to place it next to
        position: Before or after the target

    Returns:
        New ordering as a list

    Raises:
        NotFoundError: If either ID is not in the ordering
    """
    position = ReorderPosition(position)
    if target_id not in ordered_ids:
        raise NotFoundError(reorder_target_not_found(target_id))
    if moving_id not in ordered_ids:
        raise NotFoundError(subscription_not_found(moving_id))
    if moving_id == target_id:
        return list(ordered_ids)

    remaining = [item for item in ordered_ids if item != moving_id]
    index = remaining.index(target_id)
    if position == ReorderPosition.AFTER:
        index += 1
    remaining.insert(index, moving_id)
    return remaining


def renumber(ordered_ids: Sequence[str]) -> dict[str, int]:
    """Contiguous sort orders, starting at 0, for an ordering."""
    return {item: index for index, item in enumerate(ordered_ids)}
