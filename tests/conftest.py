"""Shared pytest fixtures for subtrack tests."""

import tempfile
import os
from decimal import Decimal
import pytest

from subtrack.database.factories import create_sqlite_database
from subtrack.domain.entities import (
    Category,
    Frequency,
    RecurrenceRule,
    Subscription,
    SubscriptionType,
)
from subtrack.domain.subscription import SubscriptionService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def subscription_service(temp_db):
    """Create a SubscriptionService with a temporary database."""
    return SubscriptionService(temp_db)


@pytest.fixture
def sample_subscriptions(subscription_service):
    """Create a small mixed set of subscriptions, keyed by name."""
    netflix = subscription_service.create_subscription(
        name="Netflix",
        type="subscription",
        category="Entertainment",
        day_of_month=31,
        amount=Decimal("199.99"),
        currency="TRY",
    )
    card = subscription_service.create_subscription(
        name="Visa Card",
        type="credit_card",
        category="Banking",
        statement_day=15,
        due_day=25,
    )
    rent = subscription_service.create_subscription(
        name="Rent",
        type="bill",
        category="Bills",
        day_of_month=1,
        amount=Decimal("15000"),
        currency="TRY",
    )
    hosting = subscription_service.create_subscription(
        name="Hosting",
        type="subscription",
        category="SaaS",
        frequency="yearly",
        day_of_month=10,
        amount=Decimal("120"),
        currency="USD",
    )
    return {sub.name: sub for sub in (netflix, card, rent, hosting)}


@pytest.fixture
def make_subscription():
    """Factory for in-memory Subscription entities."""

    def _make(
        id="sub-1",
        name="Netflix",
        type=SubscriptionType.SUBSCRIPTION,
        category=Category.ENTERTAINMENT,
        frequency=Frequency.MONTHLY,
        day_of_month=None,
        **kwargs,
    ):
        return Subscription(
            id=id,
            name=name,
            type=type,
            category=category,
            recurrence=RecurrenceRule(frequency=frequency, day_of_month=day_of_month),
            **kwargs,
        )

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def invoke_cli(cli_runner, temp_db):
    """Run the CLI against the temporary database.

    The fixture's own session is closed after each run so that later reads in
    the test see what the command committed.
    """
    from subtrack.cli.main import cli

    def _invoke(*args, **kwargs):
        result = cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)
        temp_db.disconnect()
        return result

    return _invoke
