"""Text formatting helpers shared by CLI commands."""

from decimal import Decimal
from typing import Optional

from subtrack.domain.entities import Subscription, SubscriptionType

CURRENCY_SYMBOLS = {"TRY": "₺", "USD": "$", "EUR": "€", "GBP": "£"}

SHORT_ID_LENGTH = 8


def short_id(subscription_id: str) -> str:
    """Abbreviated ID for tables; any unique prefix resolves back to the full ID."""
    return subscription_id[:SHORT_ID_LENGTH]


def format_amount(amount: Optional[Decimal], currency: str) -> str:
    """Amount with currency symbol, or '-' for non-monetary records."""
    if amount is None:
        return "-"
    symbol = CURRENCY_SYMBOLS.get(currency, currency)
    return f"{symbol} {amount:,.2f}"


def describe_schedule(subscription: Subscription) -> str:
    """Human readable schedule of a subscription."""
    if subscription.type == SubscriptionType.CREDIT_CARD:
        parts = []
        if subscription.statement_day:
            parts.append(f"statement day {subscription.statement_day}")
        if subscription.due_day:
            parts.append(f"due day {subscription.due_day}")
        return ", ".join(parts) or "no card days"

    day = subscription.recurrence.day_of_month or 1
    return f"{subscription.recurrence.frequency.value}, day {day}"
