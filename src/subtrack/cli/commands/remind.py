"""Reminder command."""

import click
from subtrack.cli.error_handling import fail
from subtrack.cli.formatting import format_amount
from subtrack.domain.reminder import ReminderService
from subtrack.utils.date_parser import parse_date


@click.command("remind")
@click.option("--date", "on_date", help="Check reminders for this date instead of today")
@click.pass_context
def remind(ctx, on_date: str | None):
    """List subscriptions with a payment reminder due today.

    Meant to be run periodically, e.g. from cron.
    """
    db = ctx.obj["db"]
    service = ReminderService(db)

    today = None
    if on_date:
        try:
            today = parse_date(on_date)
        except ValueError as e:
            fail(ctx, f"Invalid date: {e}")

    due = service.due_reminders(today)
    if not due:
        click.echo("No reminders due.")
        return

    for subscription in due:
        payment_date = service.next_payment(subscription, today)
        click.echo(
            f"Reminder: {subscription.name} is due on {payment_date} "
            f"({format_amount(subscription.amount, subscription.currency)})"
        )


def register_commands(cli: click.Group) -> None:
    """Register remind command with main CLI."""
    cli.add_command(remind)
