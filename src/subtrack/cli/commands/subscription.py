"""Subscription management commands."""

import click
from subtrack.cli.error_handling import fail, handle_domain_error
from subtrack.cli.formatting import describe_schedule, format_amount, short_id
from subtrack.domain.entities import Category, Frequency, SubscriptionType
from subtrack.domain.errors import DomainError
from subtrack.domain.ordering import ReorderPosition
from subtrack.domain.subscription import SubscriptionService
from subtrack.utils.amount_parser import parse_amount
from subtrack.utils.date_parser import parse_date
from subtrack.utils.subscription_resolver import resolve_subscription

TYPE_CHOICES = [member.value for member in SubscriptionType]
CATEGORY_CHOICES = [member.value for member in Category]
FREQUENCY_CHOICES = [member.value for member in Frequency]


def _resolve_or_exit(ctx: click.Context, service: SubscriptionService, reference: str) -> str:
    """Resolve a subscription reference, or exit with a CLI error."""
    try:
        return resolve_subscription(service, reference)
    except DomainError as e:
        handle_domain_error(ctx, e)


def _parse_optional_amount(ctx: click.Context, amount: str | None):
    if amount is None:
        return None
    try:
        return parse_amount(amount)
    except ValueError as e:
        fail(ctx, f"Invalid amount format: {e}")


def _parse_optional_date(ctx: click.Context, value: str | None, label: str):
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        fail(ctx, f"Invalid {label}: {e}")


@click.group()
def subscription_group():
    """Manage subscriptions, credit cards and bills."""
    pass


@subscription_group.command("add")
@click.argument("name")
@click.option("--type", "sub_type", type=click.Choice(TYPE_CHOICES), default="subscription", show_default=True, help="Subscription type")
@click.option("--category", type=click.Choice(CATEGORY_CHOICES, case_sensitive=False), default="Other", show_default=True, help="Category")
@click.option("--frequency", type=click.Choice(FREQUENCY_CHOICES), default="monthly", show_default=True, help="Billing frequency")
@click.option("--day", "day_of_month", type=int, help="Payment day of month (1-31)")
@click.option("--amount", help="Amount (e.g., 99.90)")
@click.option("--currency", default="TRY", show_default=True, help="Currency code")
@click.option("--reminder", "reminders", type=int, multiple=True, help="Remind N days before payment (repeatable, default: 1)")
@click.option("--statement-day", type=int, help="Statement day for credit cards (1-31)")
@click.option("--due-day", type=int, help="Due day for credit cards (1-31)")
@click.option("--payment-method", help="Payment method")
@click.option("--notes", help="Notes")
@click.option("--start-date", help="Start date")
@click.option("--end-date", help="End date")
@click.option("--inactive", is_flag=True, help="Create the subscription as inactive")
@click.pass_context
def add_subscription(
    ctx,
    name: str,
    sub_type: str,
    category: str,
    frequency: str,
    day_of_month: int | None,
    amount: str | None,
    currency: str,
    reminders: tuple[int, ...],
    statement_day: int | None,
    due_day: int | None,
    payment_method: str | None,
    notes: str | None,
    start_date: str | None,
    end_date: str | None,
    inactive: bool,
):
    """Add a subscription.

    Examples:
        subtrack sub add Netflix --day 31 --amount 199.99 --category Entertainment
        subtrack sub add "Visa Card" --type credit_card --statement-day 15 --due-day 25 --category Banking
        subtrack sub add "Domain" --frequency yearly --day 3 --amount 12 --currency USD
    """
    db = ctx.obj["db"]
    service = SubscriptionService(db)

    parsed_amount = _parse_optional_amount(ctx, amount)
    parsed_start = _parse_optional_date(ctx, start_date, "start date")
    parsed_end = _parse_optional_date(ctx, end_date, "end date")

    try:
        subscription = service.create_subscription(
            name=name,
            type=sub_type,
            category=category,
            frequency=frequency,
            day_of_month=day_of_month,
            amount=parsed_amount,
            currency=currency,
            reminders=reminders or (1,),
            is_active=not inactive,
            statement_day=statement_day,
            due_day=due_day,
            payment_method=payment_method,
            notes=notes,
            start_date=parsed_start,
            end_date=parsed_end,
        )
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Created subscription '{subscription.name}' (ID: {subscription.id})")
    click.echo(f"  Schedule: {describe_schedule(subscription)}")
    if subscription.amount is not None:
        click.echo(f"  Amount: {format_amount(subscription.amount, subscription.currency)}")


@subscription_group.command("list")
@click.option("--active", "active_only", is_flag=True, help="Only show active subscriptions")
@click.option("--category", type=click.Choice(CATEGORY_CHOICES), help="Only show one category")
@click.option("--search", help="Only show names containing this text")
@click.pass_context
def list_subscriptions(ctx, active_only: bool, category: str | None, search: str | None):
    """List subscriptions in display order."""
    db = ctx.obj["db"]
    service = SubscriptionService(db)

    if search:
        subscriptions = service.search_subscriptions(search)
        if active_only:
            subscriptions = [sub for sub in subscriptions if sub.is_active]
        if category:
            subscriptions = [sub for sub in subscriptions if sub.category.value == category]
    else:
        subscriptions = service.list_subscriptions(active_only=active_only, category=category)

    if not subscriptions:
        click.echo("No subscriptions found.")
        return

    click.echo(f"\nFound {len(subscriptions)} subscription(s):")
    click.echo("-" * 110)
    click.echo(
        f"{'ID':<9} {'Name':<24} {'Type':<13} {'Category':<14} {'Schedule':<30} {'Amount':<14} Active"
    )
    click.echo("-" * 110)
    for sub in subscriptions:
        click.echo(
            f"{short_id(sub.id):<9} {sub.name[:24]:<24} {sub.type.value:<13} {sub.category.value:<14} "
            f"{describe_schedule(sub)[:30]:<30} {format_amount(sub.amount, sub.currency):<14} "
            f"{'yes' if sub.is_active else 'no'}"
        )


@subscription_group.command("show")
@click.argument("subscription", metavar="SUBSCRIPTION")
@click.pass_context
def show_subscription(ctx, subscription: str):
    """Show all fields of a subscription.

    SUBSCRIPTION can be an ID, a unique ID prefix or a name.
    """
    db = ctx.obj["db"]
    service = SubscriptionService(db)
    sub = service.require_subscription(_resolve_or_exit(ctx, service, subscription))

    click.echo(f"\nSubscription ID: {sub.id}")
    click.echo(f"  Name: {sub.name}")
    click.echo(f"  Type: {sub.type.value}")
    click.echo(f"  Category: {sub.category.value}")
    click.echo(f"  Schedule: {describe_schedule(sub)}")
    click.echo(f"  Amount: {format_amount(sub.amount, sub.currency)}")
    click.echo(f"  Reminders: {', '.join(str(days) for days in sub.reminders) or 'none'} day(s) before")
    click.echo(f"  Active: {'yes' if sub.is_active else 'no'}")
    click.echo(f"  Sort order: {sub.sort_order}")
    if sub.payment_method:
        click.echo(f"  Payment method: {sub.payment_method}")
    if sub.start_date:
        click.echo(f"  Start date: {sub.start_date}")
    if sub.end_date:
        click.echo(f"  End date: {sub.end_date}")
    if sub.notes:
        click.echo(f"  Notes: {sub.notes}")
    click.echo(f"  Created: {sub.created_at}")
    click.echo(f"  Updated: {sub.updated_at}")


@subscription_group.command("edit")
@click.argument("subscription", metavar="SUBSCRIPTION")
@click.option("--name", help="New name")
@click.option("--type", "sub_type", type=click.Choice(TYPE_CHOICES), help="Subscription type")
@click.option("--category", type=click.Choice(CATEGORY_CHOICES), help="Category")
@click.option("--frequency", type=click.Choice(FREQUENCY_CHOICES), help="Billing frequency")
@click.option("--day", "day_of_month", type=int, help="Payment day of month (1-31)")
@click.option("--amount", help="Amount")
@click.option("--clear-amount", is_flag=True, help="Remove the amount")
@click.option("--currency", help="Currency code")
@click.option("--reminder", "reminders", type=int, multiple=True, help="Replace reminders (repeatable)")
@click.option("--statement-day", type=int, help="Statement day for credit cards (1-31)")
@click.option("--due-day", type=int, help="Due day for credit cards (1-31)")
@click.option("--payment-method", help="Payment method")
@click.option("--notes", help="Notes")
@click.pass_context
def edit_subscription(
    ctx,
    subscription: str,
    name: str | None,
    sub_type: str | None,
    category: str | None,
    frequency: str | None,
    day_of_month: int | None,
    amount: str | None,
    clear_amount: bool,
    currency: str | None,
    reminders: tuple[int, ...],
    statement_day: int | None,
    due_day: int | None,
    payment_method: str | None,
    notes: str | None,
):
    """Update a subscription.

    Updates only the fields that are provided.

    Examples:
        subtrack sub edit Netflix --amount 229.99
        subtrack sub edit 3f2a --day 15 --reminder 3 --reminder 0
    """
    db = ctx.obj["db"]
    service = SubscriptionService(db)
    subscription_id = _resolve_or_exit(ctx, service, subscription)

    if amount is not None and clear_amount:
        fail(ctx, "--amount and --clear-amount cannot be combined.")

    options = {
        "name": name,
        "type": sub_type,
        "category": category,
        "frequency": frequency,
        "day_of_month": day_of_month,
        "currency": currency,
        "statement_day": statement_day,
        "due_day": due_day,
        "payment_method": payment_method,
        "notes": notes,
    }
    changes = {key: value for key, value in options.items() if value is not None}
    if amount is not None:
        changes["amount"] = _parse_optional_amount(ctx, amount)
    if clear_amount:
        changes["amount"] = None
    if reminders:
        changes["reminders"] = reminders

    if not changes:
        click.echo("Nothing to update.")
        return

    try:
        updated = service.update_subscription(subscription_id, **changes)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Updated subscription '{updated.name}' (ID: {updated.id})")


@subscription_group.command("toggle")
@click.argument("subscription", metavar="SUBSCRIPTION")
@click.pass_context
def toggle_subscription(ctx, subscription: str):
    """Activate or deactivate a subscription."""
    db = ctx.obj["db"]
    service = SubscriptionService(db)
    subscription_id = _resolve_or_exit(ctx, service, subscription)

    updated = service.toggle_active(subscription_id)
    state = "active" if updated.is_active else "inactive"
    click.echo(f"Subscription '{updated.name}' is now {state}")


@subscription_group.command("delete")
@click.argument("subscription", metavar="SUBSCRIPTION")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete_subscription(ctx, subscription: str, yes: bool):
    """Delete a subscription."""
    db = ctx.obj["db"]
    service = SubscriptionService(db)
    subscription_id = _resolve_or_exit(ctx, service, subscription)
    sub = service.require_subscription(subscription_id)

    # Confirm deletion
    if not yes and not click.confirm(f"Are you sure you want to delete subscription '{sub.name}'?"):
        click.echo("Deletion cancelled.")
        return

    service.delete_subscription(subscription_id)
    click.echo(f"Deleted subscription '{sub.name}'")


@subscription_group.command("move")
@click.argument("subscription", metavar="SUBSCRIPTION")
@click.argument("target", metavar="TARGET")
@click.option(
    "--position",
    type=click.Choice([member.value for member in ReorderPosition]),
    default="before",
    show_default=True,
    help="Place SUBSCRIPTION before or after TARGET",
)
@click.pass_context
def move_subscription(ctx, subscription: str, target: str, position: str):
    """Move a subscription directly before or after another one.

    Examples:
        subtrack sub move Spotify Netflix
        subtrack sub move "Visa Card" Rent --position after
    """
    db = ctx.obj["db"]
    service = SubscriptionService(db)
    subscription_id = _resolve_or_exit(ctx, service, subscription)
    target_id = _resolve_or_exit(ctx, service, target)

    try:
        ordered = service.move_subscription(subscription_id, target_id, position)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo("New order:")
    for index, sub in enumerate(ordered, start=1):
        marker = "*" if sub.id == subscription_id else " "
        click.echo(f"{marker} {index:3d}. {sub.name}")


def register_commands(cli: click.Group) -> None:
    """Register subscription commands with main CLI."""
    cli.add_command(subscription_group, name="sub")
