"""Monthly-equivalent cost aggregation."""

import logging
from decimal import Decimal
from typing import Iterable

from subtrack.database.base import Database
from subtrack.domain.entities import CurrencyCost, Frequency, Subscription

logger = logging.getLogger(__name__)

WEEKS_PER_MONTH = Decimal("4.33")
MONTHS_PER_YEAR = Decimal("12")

CostReport = dict[str, CurrencyCost]


def monthly_equivalent(amount: Decimal, frequency: Frequency) -> Decimal:
    """Average monthly cost of an amount billed at the given frequency."""
    amount = Decimal(amount)
    if frequency == Frequency.WEEKLY:
        return amount * WEEKS_PER_MONTH
    if frequency == Frequency.YEARLY:
        return amount / MONTHS_PER_YEAR
    return amount


def aggregate_costs(subscriptions: Iterable[Subscription]) -> CostReport:
    """Monthly-equivalent totals per currency, broken down by category.

    Only active subscriptions with an amount contribute. Currencies are never
    converted into each other; each one gets its own bucket.
    """
    report: CostReport = {}
    for subscription in subscriptions:
        if not subscription.is_well_formed():
            logger.warning(
                "Skipping malformed subscription %r during cost aggregation",
                getattr(subscription, "id", None),
            )
            continue
        if not subscription.is_active or subscription.amount is None:
            continue

        monthly = monthly_equivalent(subscription.amount, subscription.recurrence.frequency)
        bucket = report.setdefault(subscription.currency, CurrencyCost(currency=subscription.currency))
        bucket.total += monthly
        bucket.by_category[subscription.category] = (
            bucket.by_category.get(subscription.category, Decimal("0")) + monthly
        )

    return report


class CostService:
    """Service for cost reports over stored subscriptions."""

    def __init__(self, db: Database):
        """Initialize cost service.

        Args:
            db: Database instance
        """
        self.db = db

    def build_report(self) -> CostReport:
        """Build a monthly-equivalent cost report, currencies sorted by code."""
        report = aggregate_costs(self.db.list_subscriptions(active_only=True))
        return {currency: report[currency] for currency in sorted(report)}
