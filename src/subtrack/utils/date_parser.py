"""Date parsing utilities."""

from datetime import date, timedelta
from typing import Optional

from dateutil import parser as date_parser
from dateutil.relativedelta import relativedelta

from subtrack.domain.recurrence import days_in_month

PERIODS = ("this-month", "next-month", "last-month", "this-year", "next-30-days")


def parse_date(date_str: str, today: Optional[date] = None) -> date:
    """Parse a date string into a date object.

    Supports various formats including relative dates:
    - Absolute dates: "2024-01-15", "January 15, 2024", etc.
    - Relative dates: "today", "yesterday", "tomorrow", "next month", "this month", etc.

    Args:
        date_str: Date string in various formats
        today: Reference date for relative dates (defaults to today)

    Returns:
        Date object

    Raises:
        ValueError: If date string cannot be parsed
    """
    date_str = date_str.strip().lower()
    today = today or date.today()

    # Handle relative dates
    relative_dates = {
        "today": today,
        "yesterday": today - timedelta(days=1),
        "tomorrow": today + timedelta(days=1),
    }

    if date_str in relative_dates:
        return relative_dates[date_str]

    # Handle "last/this/next" + month/year, always the first day of the period
    if date_str.startswith("last "):
        period = date_str[5:]
        if period == "month":
            return (today - relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) - relativedelta(years=1)

    elif date_str.startswith("this "):
        period = date_str[5:]
        if period == "month":
            return today.replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1)

    elif date_str.startswith("next "):
        period = date_str[5:]
        if period == "month":
            return (today + relativedelta(months=1)).replace(day=1)
        elif period == "year":
            return today.replace(month=1, day=1) + relativedelta(years=1)

    # Try parsing as absolute date
    try:
        dt = date_parser.parse(date_str)
        return dt.date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Could not parse date '{date_str}': {e}")


def month_range(year: int, month: int) -> tuple[date, date]:
    """First and last day of a month."""
    return date(year, month, 1), date(year, month, days_in_month(year, month))


def parse_month(month_str: str) -> tuple[date, date]:
    """Parse a "YYYY-MM" string into the month's first and last day.

    Raises:
        ValueError: If the string is not a valid year and month
    """
    parts = month_str.strip().split("-")
    if len(parts) != 2 or not all(part.isdigit() for part in parts):
        raise ValueError(f"Could not parse month '{month_str}': expected YYYY-MM")
    year, month = int(parts[0]), int(parts[1])
    if not 1 <= month <= 12:
        raise ValueError(f"Could not parse month '{month_str}': month must be 1-12")
    return month_range(year, month)


def get_date_range(period: str, today: Optional[date] = None) -> tuple[date, date]:
    """Get start and end dates for a specified period.

    Unlike transaction history, payment calendars look forward, so month
    and year periods cover the whole period rather than ending today.

    Args:
        period: Period string (this-month, next-month, last-month, this-year, next-30-days)
        today: Reference date (defaults to today)

    Returns:
        Tuple of (start_date, end_date) for the specified period

    Raises:
        ValueError: If period string is not recognized
    """
    period = period.strip().lower()
    today = today or date.today()

    if period == "this-month":
        return month_range(today.year, today.month)

    elif period == "next-month":
        following = today.replace(day=1) + relativedelta(months=1)
        return month_range(following.year, following.month)

    elif period == "last-month":
        previous = today.replace(day=1) - relativedelta(months=1)
        return month_range(previous.year, previous.month)

    elif period == "this-year":
        return date(today.year, 1, 1), date(today.year, 12, 31)

    elif period == "next-30-days":
        return today, today + timedelta(days=30)

    else:
        raise ValueError(f"Unknown period: '{period}'. Supported periods: {', '.join(PERIODS)}")
