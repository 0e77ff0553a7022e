"""Subscription domain service."""

import logging
from datetime import date
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Iterable, Optional, TypeVar

from subtrack.database.base import Database
from subtrack.domain.entities import (
    DEFAULT_CURRENCY,
    DEFAULT_REMINDERS,
    Category,
    Frequency,
    Subscription,
    SubscriptionType,
)
from subtrack.domain.errors import (
    NotFoundError,
    ValidationError,
    day_out_of_range,
    subscription_not_found,
    unknown_choice,
)
from subtrack.domain.ordering import ReorderPosition

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

DAY_FIELDS = ("day_of_month", "statement_day", "due_day")


def coerce_choice(enum_cls: type[E], value: Any, field_name: str) -> E:
    """Convert a raw value into an enum member or raise ValidationError."""
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(
            unknown_choice(field_name, value, [member.value for member in enum_cls])
        ) from None


def validate_day(field_name: str, value: Optional[int]) -> Optional[int]:
    """Validate an optional day-of-month field."""
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        raise ValidationError(f"{field_name} must be an integer, got {value!r}")
    if not 1 <= value <= 31:
        raise ValidationError(day_out_of_range(field_name, value))
    return value


def validate_amount(value: Any) -> Optional[Decimal]:
    """Validate an optional non-negative amount."""
    if value is None:
        return None
    try:
        amount = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise ValidationError(f"Invalid amount {value!r}") from None
    if amount < 0:
        raise ValidationError(f"Amount cannot be negative, got {amount}")
    return amount


def validate_reminders(values: Iterable[int]) -> tuple[int, ...]:
    """Validate reminder offsets; returns unique offsets, largest first."""
    reminders = set()
    for value in values:
        if not isinstance(value, int) or isinstance(value, bool) or value < 0:
            raise ValidationError(f"Reminder days must be non-negative integers, got {value!r}")
        reminders.add(value)
    return tuple(sorted(reminders, reverse=True))


def validate_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Subscription name is required")
    return value.strip()


def validate_currency(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError("Currency is required")
    return value.strip().upper()


def validate_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Validate and normalize the subscription fields that are present."""
    validated = dict(fields)
    if "name" in validated:
        validated["name"] = validate_name(validated["name"])
    if "type" in validated:
        validated["type"] = coerce_choice(SubscriptionType, validated["type"], "type")
    if "category" in validated:
        validated["category"] = coerce_choice(Category, validated["category"], "category")
    if "frequency" in validated:
        validated["frequency"] = coerce_choice(Frequency, validated["frequency"], "frequency")
    for field_name in DAY_FIELDS:
        if field_name in validated:
            validated[field_name] = validate_day(field_name, validated[field_name])
    if "amount" in validated:
        validated["amount"] = validate_amount(validated["amount"])
    if "currency" in validated:
        validated["currency"] = validate_currency(validated["currency"])
    if "reminders" in validated:
        validated["reminders"] = validate_reminders(validated["reminders"])
    return validated


class SubscriptionService:
    """Service for managing subscriptions."""

    def __init__(self, db: Database):
        """Initialize subscription service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_subscription(
        self,
        name: str,
        type: SubscriptionType | str,
        category: Category | str = Category.OTHER,
        frequency: Frequency | str = Frequency.MONTHLY,
        day_of_month: Optional[int] = None,
        amount: Optional[Decimal] = None,
        currency: str = DEFAULT_CURRENCY,
        reminders: Iterable[int] = DEFAULT_REMINDERS,
        is_active: bool = True,
        statement_day: Optional[int] = None,
        due_day: Optional[int] = None,
        payment_method: Optional[str] = None,
        notes: Optional[str] = None,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> Subscription:
        """Create a subscription at the end of the current ordering.

        Args:
            name: Display name
            type: Subscription type (subscription, credit_card, bill, other)
            category: Reporting category
            frequency: Billing frequency
            day_of_month: Payment day (1-31) for non-card subscriptions
            amount: Optional non-negative amount
            currency: Currency code
            reminders: Days before the payment to remind on
            is_active: Whether the subscription is projected and counted
            statement_day: Statement day (1-31) for credit cards
            due_day: Due day (1-31) for credit cards
            payment_method: Optional payment method
            notes: Optional notes
            start_date: Optional start date
            end_date: Optional end date

        Returns:
            The stored subscription

        Raises:
            ValidationError: If any field is invalid
        """
        fields = validate_fields(
            {
                "name": name,
                "type": type,
                "category": category,
                "frequency": frequency,
                "day_of_month": day_of_month,
                "amount": amount,
                "currency": currency,
                "reminders": reminders,
                "statement_day": statement_day,
                "due_day": due_day,
            }
        )
        if start_date and end_date and end_date < start_date:
            raise ValidationError("End date cannot be before start date")

        subscription = self.db.create_subscription(
            is_active=is_active,
            payment_method=payment_method,
            notes=notes,
            start_date=start_date,
            end_date=end_date,
            **fields,
        )
        logger.info("Created subscription %s (%s)", subscription.id, subscription.name)
        return subscription

    def get_subscription(self, subscription_id: str) -> Optional[Subscription]:
        """Get subscription by ID, or None if not found."""
        return self.db.get_subscription(subscription_id)

    def require_subscription(self, subscription_id: str) -> Subscription:
        """Get subscription by ID.

        Raises:
            NotFoundError: If the subscription does not exist
        """
        subscription = self.db.get_subscription(subscription_id)
        if subscription is None:
            raise NotFoundError(subscription_not_found(subscription_id))
        return subscription

    def list_subscriptions(
        self, active_only: bool = False, category: Optional[Category | str] = None
    ) -> list[Subscription]:
        """List subscriptions in display order."""
        if category is not None:
            category = coerce_choice(Category, category, "category")
        return self.db.list_subscriptions(active_only=active_only, category=category)

    def search_subscriptions(self, query: str) -> list[Subscription]:
        """Subscriptions whose name contains ``query`` (case-insensitive)."""
        return self.db.list_subscriptions(search=query.strip())

    def update_subscription(self, subscription_id: str, **changes: Any) -> Subscription:
        """Update a subscription and return the stored result.

        Raises:
            NotFoundError: If the subscription does not exist
            ValidationError: If any changed field is invalid
        """
        current = self.require_subscription(subscription_id)
        fields = validate_fields(changes)

        start_date = fields.get("start_date", current.start_date)
        end_date = fields.get("end_date", current.end_date)
        if start_date and end_date and end_date < start_date:
            raise ValidationError("End date cannot be before start date")

        return self.db.update_subscription(subscription_id, **fields)

    def toggle_active(self, subscription_id: str) -> Subscription:
        """Flip the active flag of a subscription."""
        current = self.require_subscription(subscription_id)
        return self.db.update_subscription(subscription_id, is_active=not current.is_active)

    def delete_subscription(self, subscription_id: str) -> None:
        """Delete a subscription.

        Raises:
            NotFoundError: If the subscription does not exist
        """
        self.require_subscription(subscription_id)
        self.db.delete_subscription(subscription_id)
        logger.info("Deleted subscription %s", subscription_id)

    def move_subscription(
        self,
        subscription_id: str,
        target_id: str,
        position: ReorderPosition | str = ReorderPosition.BEFORE,
    ) -> list[Subscription]:
        """Place a subscription directly before or after another.

        Returns:
            All subscriptions in their new order

        Raises:
            NotFoundError: If either subscription does not exist
            ValidationError: If the position is not 'before' or 'after'
        """
        position = coerce_choice(ReorderPosition, position, "position")
        self.require_subscription(subscription_id)
        return self.db.move_subscription(subscription_id, target_id, position)
