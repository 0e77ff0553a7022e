"""Calendar view command."""

import click
from subtrack.cli.date_filters import resolve_cli_date_range
from subtrack.cli.formatting import format_amount
from subtrack.domain.entities import Category, FilterSpec
from subtrack.domain.projection import CalendarService, month_grid_window

CATEGORY_CHOICES = [member.value for member in Category]

KIND_LABELS = {
    "payment": "Payment",
    "statement": "Statement",
    "due": "Due",
    "reminder": "Reminder",
}


@click.command("calendar")
@click.option("--month", help="Month to show (YYYY-MM)")
@click.option("--start-date", help="Window start (YYYY-MM-DD or relative like 'today')")
@click.option("--end-date", help="Window end (YYYY-MM-DD or relative like 'next month')")
@click.option("--this-month", is_flag=True, help="Show the current month (default)")
@click.option("--next-month", is_flag=True, help="Show next month")
@click.option("--last-month", is_flag=True, help="Show last month")
@click.option("--this-year", is_flag=True, help="Show the current year")
@click.option("--next-30-days", is_flag=True, help="Show today and the next 30 days")
@click.option("--grid", is_flag=True, help="Expand a month to its six-week Monday-start grid")
@click.option("--category", "categories", type=click.Choice(CATEGORY_CHOICES), multiple=True, help="Only show these categories (repeatable)")
@click.option("--upcoming", "upcoming_days", type=int, help="Hide events more than N days after today")
@click.option("--payments-only", is_flag=True, help="Only show payments and card due dates")
@click.option("--search", "search_text", default="", help="Only show events whose title contains this text")
@click.option("--all-days", is_flag=True, help="Also list days without events")
@click.pass_context
def calendar(
    ctx,
    month: str | None,
    start_date: str | None,
    end_date: str | None,
    this_month: bool,
    next_month: bool,
    last_month: bool,
    this_year: bool,
    next_30_days: bool,
    grid: bool,
    categories: tuple[str, ...],
    upcoming_days: int | None,
    payments_only: bool,
    search_text: str,
    all_days: bool,
):
    """Show projected payments, statements and due dates.

    Examples:
        subtrack calendar
        subtrack calendar --month 2024-04 --payments-only
        subtrack calendar --next-30-days --category Banking --category Bills
    """
    db = ctx.obj["db"]
    service = CalendarService(db)

    start, end = resolve_cli_date_range(
        ctx,
        start_date=start_date,
        end_date=end_date,
        month=month,
        period_flags={
            "this-month": this_month,
            "next-month": next_month,
            "last-month": last_month,
            "this-year": this_year,
            "next-30-days": next_30_days,
        },
    )
    if grid:
        start, end = month_grid_window(start.year, start.month)

    spec = FilterSpec(
        categories=frozenset(Category(value) for value in categories),
        upcoming_days=upcoming_days,
        payments_only=payments_only,
        search_text=search_text,
    )
    days = service.calendar_days(start, end, spec=spec)
    event_count = sum(len(day.events) for day in days)

    click.echo(f"\nCalendar {start} to {end}: {event_count} event(s)")
    click.echo("-" * 80)

    if event_count == 0 and not all_days:
        click.echo("No events found.")
        return

    for day in days:
        if not day.events and not all_days:
            continue
        click.echo(f"{day.date.isoformat()} {day.date.strftime('%a')}")
        for event in day.events:
            label = KIND_LABELS[event.kind.value]
            click.echo(
                f"    {label:<10} {event.title[:36]:<36} {event.category.value:<14} "
                f"{format_amount(event.amount, event.currency)}"
            )


def register_commands(cli: click.Group) -> None:
    """Register calendar command with main CLI."""
    cli.add_command(calendar)
