"""Tests for domain entities."""

from decimal import Decimal

import pytest

from subtrack.domain.entities import (
    CardSchedule,
    Category,
    FilterSpec,
    MonthlySchedule,
    SubscriptionType,
)


class TestSubscription:
    """Tests for the Subscription entity."""

    def test_defaults(self, make_subscription):
        """Test default currency, reminders and state."""
        subscription = make_subscription()

        assert subscription.currency == "TRY"
        assert subscription.reminders == (1,)
        assert subscription.is_active is True
        assert subscription.amount is None
        assert subscription.sort_order == 0

    def test_is_immutable(self, make_subscription):
        """Test that subscriptions are frozen."""
        subscription = make_subscription()
        with pytest.raises(AttributeError):
            subscription.name = "Other"

    def test_monthly_schedule(self, make_subscription):
        """Test that non-card types use the recurrence day."""
        subscription = make_subscription(type=SubscriptionType.BILL, day_of_month=12)
        assert subscription.schedule == MonthlySchedule(day_of_month=12)

    def test_card_schedule(self, make_subscription):
        """Test that credit cards use statement and due days."""
        subscription = make_subscription(
            type=SubscriptionType.CREDIT_CARD, day_of_month=3, statement_day=10, due_day=20
        )
        assert subscription.schedule == CardSchedule(statement_day=10, due_day=20)

    def test_is_well_formed(self, make_subscription):
        """Test that a complete record passes the shape check."""
        assert make_subscription(day_of_month=5, amount=Decimal("9.99")).is_well_formed()
        assert make_subscription(type=SubscriptionType.CREDIT_CARD, due_day=25).is_well_formed()

    @pytest.mark.parametrize(
        "overrides",
        [
            {"id": None},
            {"name": "   "},
            {"category": "Streaming"},
            {"sort_order": None},
            {"sort_order": True},
            {"day_of_month": "15"},
            {"statement_day": 1.5},
            {"currency": None},
            {"amount": "9.99"},
        ],
    )
    def test_is_not_well_formed(self, make_subscription, overrides):
        """Test that wrongly typed fields fail the shape check."""
        assert not make_subscription(**overrides).is_well_formed()

    def test_amount_is_decimal(self, make_subscription):
        """Test that amounts keep Decimal precision."""
        subscription = make_subscription(amount=Decimal("0.10") + Decimal("0.20"))
        assert subscription.amount == Decimal("0.30")


def test_enum_values():
    """Test that enum members compare equal to their stored strings."""
    assert SubscriptionType("credit_card") is SubscriptionType.CREDIT_CARD
    assert Category("SaaS") is Category.SAAS
    assert Category.BANKING == "Banking"


def test_filter_spec_defaults():
    """Test that the default filter spec filters nothing."""
    spec = FilterSpec()
    assert spec.categories == frozenset()
    assert spec.upcoming_days is None
    assert spec.payments_only is False
    assert spec.search_text == ""
