"""Utility functions for subtrack."""

from subtrack.utils.date_parser import parse_date, parse_month
from subtrack.utils.amount_parser import parse_amount
from subtrack.utils.subscription_resolver import resolve_subscription

__all__ = ["parse_date", "parse_month", "parse_amount", "resolve_subscription"]
