"""CLI helpers for date window resolution."""

from datetime import date

import click

from subtrack.cli.error_handling import fail
from subtrack.utils.date_parser import get_date_range, parse_date, parse_month


def resolve_cli_date_range(
    ctx: click.Context,
    *,
    start_date: str | None,
    end_date: str | None,
    month: str | None,
    period_flags: dict[str, bool],
    today: date | None = None,
) -> tuple[date, date]:
    """Resolve a calendar window from period flags, --month or explicit dates.

    Defaults to the current month. A lone --start-date or --end-date is
    completed with the other end of the current month.
    """
    period_count = sum(1 for is_set in period_flags.values() if is_set)
    sources = period_count + (1 if month else 0) + (1 if (start_date or end_date) else 0)

    if period_count > 1:
        fail(
            ctx,
            "Only one period option (--this-month, --next-month, --last-month, "
            "--this-year, --next-30-days) can be specified at a time.",
        )

    if sources > 1:
        fail(ctx, "Period options, --month and --start-date/--end-date cannot be combined.")

    if period_count == 1:
        for period, is_set in period_flags.items():
            if is_set:
                return get_date_range(period, today=today)

    if month:
        try:
            return parse_month(month)
        except ValueError as e:
            fail(ctx, f"Invalid month: {e}")

    default_start, default_end = get_date_range("this-month", today=today)
    start, end = default_start, default_end

    if start_date:
        try:
            start = parse_date(start_date, today=today)
        except ValueError as e:
            fail(ctx, f"Invalid start date: {e}")

    if end_date:
        try:
            end = parse_date(end_date, today=today)
        except ValueError as e:
            fail(ctx, f"Invalid end date: {e}")

    if start > end:
        fail(ctx, "Start date must not be after end date.")

    return start, end
