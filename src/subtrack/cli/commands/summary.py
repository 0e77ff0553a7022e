"""Summary commands."""

import click
from subtrack.cli.formatting import format_amount
from subtrack.domain.costs import CostService


@click.command("summary")
@click.pass_context
def summary(ctx):
    """Show the monthly-equivalent cost of active subscriptions.

    Weekly amounts count 4.33 times per month and yearly amounts one twelfth.
    Each currency is reported separately; nothing is converted.
    """
    db = ctx.obj["db"]
    service = CostService(db)

    report = service.build_report()
    if not report:
        click.echo("No active subscriptions with an amount found.")
        return

    click.echo("\nMonthly Cost Summary")
    for currency, cost in report.items():
        click.echo("=" * 60)
        click.echo(f"{currency:<30} {format_amount(cost.total, currency):>29}")
        click.echo("-" * 60)
        for share in cost.ranked_categories():
            click.echo(
                f"  {share.category.value:<20} {format_amount(share.amount, currency):>20} "
                f"{share.percent:>15.1f}%"
            )


def register_commands(cli: click.Group) -> None:
    """Register summary command with main CLI."""
    cli.add_command(summary)
