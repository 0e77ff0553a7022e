"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Any, Optional, Sequence

# Import entities directly to avoid circular import through domain/__init__.py
from subtrack.domain.entities import Subscription


class Database(ABC):
    """Abstract subscription store for subtrack.

    Write operations return the refreshed stored state, so callers never keep
    their own copy of subscription data between calls.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def create_subscription(
        self,
        name: str,
        type: str,
        category: str,
        frequency: str,
        day_of_month: Optional[int] = None,
        amount: Optional[Decimal] = None,
        currency: str = "TRY",
        reminders: Sequence[int] = (1,),
        is_active: bool = True,
        statement_day: Optional[int] = None,
        due_day: Optional[int] = None,
        payment_method: Optional[str] = None,
        notes: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        sort_order: Optional[int] = None,
    ) -> Subscription:
        """Create a subscription. New subscriptions go to the end of the ordering
        unless ``sort_order`` is given."""
        pass

    @abstractmethod
    def get_subscription(self, subscription_id: str) -> Optional[Subscription]:
        """Get subscription by ID."""
        pass

    @abstractmethod
    def list_subscriptions(
        self,
        active_only: bool = False,
        category: Optional[str] = None,
        search: Optional[str] = None,
    ) -> list[Subscription]:
        """List subscriptions ordered by sort order, then ID.

        Args:
            active_only: If True, only return active subscriptions
            category: Optional category value filter
            search: Optional case-insensitive name substring
        """
        pass

    @abstractmethod
    def update_subscription(self, subscription_id: str, **changes: Any) -> Subscription:
        """Update subscription fields and return the stored result."""
        pass

    @abstractmethod
    def delete_subscription(self, subscription_id: str) -> None:
        """Delete a subscription."""
        pass

    @abstractmethod
    def move_subscription(
        self, subscription_id: str, target_id: str, position: str
    ) -> list[Subscription]:
        """Move a subscription before or after another one.

        The read of the current ordering and the write of the new one happen
        in a single transaction. Returns all subscriptions in their new order.
        """
        pass

    @abstractmethod
    def next_sort_order(self) -> int:
        """Sort order that places a new subscription last."""
        pass
