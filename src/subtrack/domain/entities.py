"""Domain model entities for subtrack.

These are pure data classes representing business concepts, independent of
database schema. Subscriptions are the source of truth; events are derived
from them on demand and never stored.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

DEFAULT_CURRENCY = "TRY"
DEFAULT_REMINDERS = (1,)


class SubscriptionType(str, Enum):
    """What kind of recurring item a subscription is."""

    SUBSCRIPTION = "subscription"
    CREDIT_CARD = "credit_card"
    BILL = "bill"
    OTHER = "other"


class Category(str, Enum):
    """Fixed reporting categories."""

    BANKING = "Banking"
    ENTERTAINMENT = "Entertainment"
    BILLS = "Bills"
    SAAS = "SaaS"
    INSURANCE = "Insurance"
    SHOPPING = "Shopping"
    OTHER = "Other"


class Frequency(str, Enum):
    """Billing frequency of a recurrence rule."""

    MONTHLY = "monthly"
    WEEKLY = "weekly"
    YEARLY = "yearly"
    CUSTOM = "custom"


class EventKind(str, Enum):
    """Kind of a projected calendar event."""

    PAYMENT = "payment"
    STATEMENT = "statement"
    DUE = "due"
    REMINDER = "reminder"


@dataclass(frozen=True)
class RecurrenceRule:
    """Recurrence of a subscription.

    Only ``day_of_month`` is used when projecting events. ``weekly_days`` and
    ``timezone`` are carried as data.
    """

    frequency: Frequency = Frequency.MONTHLY
    day_of_month: Optional[int] = None
    weekly_days: tuple[str, ...] = ()
    timezone: Optional[str] = None


@dataclass(frozen=True)
class CardSchedule:
    """Credit card schedule: separate statement and due days."""

    statement_day: Optional[int]
    due_day: Optional[int]


@dataclass(frozen=True)
class MonthlySchedule:
    """Single payment on a day of every month."""

    day_of_month: Optional[int]


Schedule = Union[CardSchedule, MonthlySchedule]


def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _is_optional_int(value: object) -> bool:
    return value is None or _is_int(value)


@dataclass(frozen=True)
class Subscription:
    """Recurring payment domain entity."""

    id: str
    name: str
    type: SubscriptionType
    category: Category
    recurrence: RecurrenceRule
    amount: Optional[Decimal] = None
    currency: str = DEFAULT_CURRENCY
    reminders: tuple[int, ...] = DEFAULT_REMINDERS
    is_active: bool = True
    statement_day: Optional[int] = None
    due_day: Optional[int] = None
    sort_order: int = 0
    payment_method: Optional[str] = None
    notes: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def is_well_formed(self) -> bool:
        """Check the fields projection and cost aggregation depend on.

        Records loaded from backups or older stores can carry wrong types;
        callers skip those instead of failing the whole batch.
        """
        return (
            isinstance(self.id, str)
            and isinstance(self.name, str)
            and bool(self.name.strip())
            and isinstance(self.type, SubscriptionType)
            and isinstance(self.category, Category)
            and isinstance(self.recurrence, RecurrenceRule)
            and _is_optional_int(self.recurrence.day_of_month)
            and _is_optional_int(self.statement_day)
            and _is_optional_int(self.due_day)
            and _is_int(self.sort_order)
            and isinstance(self.currency, str)
            and (self.amount is None or isinstance(self.amount, (Decimal, int)))
        )

    @property
    def schedule(self) -> Schedule:
        """Projection schedule for this subscription."""
        if self.type == SubscriptionType.CREDIT_CARD:
            return CardSchedule(statement_day=self.statement_day, due_day=self.due_day)
        return MonthlySchedule(day_of_month=self.recurrence.day_of_month)


@dataclass(frozen=True)
class SubscriptionEvent:
    """A dated occurrence derived from a subscription."""

    id: str
    subscription_id: str
    date: date
    kind: EventKind
    title: str
    category: Category
    amount: Optional[Decimal] = None
    currency: str = DEFAULT_CURRENCY
    sort_order: int = 0


@dataclass(frozen=True)
class DayEvents:
    """One calendar day with the events that fall on it."""

    date: date
    events: tuple[SubscriptionEvent, ...] = ()


@dataclass(frozen=True)
class FilterSpec:
    """Event filter settings.

    An empty ``categories`` set means no category filtering, and an empty
    ``search_text`` means no title filtering.
    """

    categories: frozenset[Category] = frozenset()
    upcoming_days: Optional[int] = None
    payments_only: bool = False
    search_text: str = ""


@dataclass(frozen=True)
class CategoryShare:
    """Monthly-equivalent amount of one category within a currency."""

    category: Category
    amount: Decimal
    percent: float


@dataclass
class CurrencyCost:
    """Monthly-equivalent totals for a single currency."""

    currency: str
    total: Decimal = Decimal("0")
    by_category: dict[Category, Decimal] = field(default_factory=dict)

    def ranked_categories(self) -> list[CategoryShare]:
        """Categories by descending amount with their share of the total."""
        ranked = sorted(
            self.by_category.items(), key=lambda item: (-item[1], item[0].value)
        )
        shares = []
        for category, amount in ranked:
            percent = float(amount / self.total * 100) if self.total else 0.0
            shares.append(CategoryShare(category=category, amount=amount, percent=percent))
        return shares


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a backup import."""

    imported: int
    skipped: int
    failed: int
