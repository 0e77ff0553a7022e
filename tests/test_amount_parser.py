"""Tests for amount parsing."""

from decimal import Decimal

import pytest

from subtrack.utils.amount_parser import parse_amount


@pytest.mark.parametrize(
    "text,expected",
    [
        ("123.45", Decimal("123.45")),
        ("$123.45", Decimal("123.45")),
        ("₺ 99.90", Decimal("99.90")),
        ("€10", Decimal("10")),
        ("1,234.56", Decimal("1234.56")),
        ("1.234,56", Decimal("1234.56")),
        ("12,5", Decimal("12.5")),
        ("1,000", Decimal("1000")),
    ],
)
def test_parse_amount(text, expected):
    assert parse_amount(text) == expected


@pytest.mark.parametrize("text", ["", "   ", "abc"])
def test_invalid_amount(text):
    with pytest.raises(ValueError):
        parse_amount(text)
