"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so enum values and the flattened
recurrence columns stay a storage detail.
"""

from decimal import Decimal

from subtrack.domain import entities as domain
from subtrack.database.models import Subscription as ORMSubscription


def subscription_to_domain(orm_subscription: ORMSubscription) -> domain.Subscription:
    """Convert SQLAlchemy Subscription model to domain Subscription entity."""
    amount = orm_subscription.amount
    return domain.Subscription(
        id=orm_subscription.id,
        name=orm_subscription.name,
        type=domain.SubscriptionType(orm_subscription.type),
        category=domain.Category(orm_subscription.category),
        recurrence=domain.RecurrenceRule(
            frequency=domain.Frequency(orm_subscription.frequency),
            day_of_month=orm_subscription.day_of_month,
        ),
        amount=Decimal(amount) if amount is not None else None,
        currency=orm_subscription.currency,
        reminders=tuple(orm_subscription.reminders or ()),
        is_active=bool(orm_subscription.is_active),
        statement_day=orm_subscription.statement_day,
        due_day=orm_subscription.due_day,
        sort_order=orm_subscription.sort_order,
        payment_method=orm_subscription.payment_method,
        notes=orm_subscription.notes,
        start_date=orm_subscription.start_date,
        end_date=orm_subscription.end_date,
        created_at=orm_subscription.created_at,
        updated_at=orm_subscription.updated_at,
    )
