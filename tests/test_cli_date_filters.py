"""Tests for CLI date filter helper."""

from datetime import date

import click
import pytest

from subtrack.cli.date_filters import resolve_cli_date_range

TODAY = date(2024, 3, 10)


def _ctx() -> click.Context:
    return click.Context(click.Command("test"))


def _resolve(**kwargs):
    options = {"start_date": None, "end_date": None, "month": None, "period_flags": {}}
    options.update(kwargs)
    return resolve_cli_date_range(_ctx(), today=TODAY, **options)


def test_resolve_cli_date_range_rejects_multiple_periods(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        _resolve(period_flags={"this-month": True, "last-month": True})

    assert excinfo.value.exit_code == 1
    assert "Only one period option" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_period_with_start_end(capsys):
    with pytest.raises(click.exceptions.Exit) as excinfo:
        _resolve(start_date="2024-01-01", period_flags={"this-month": True})

    assert excinfo.value.exit_code == 1
    assert "cannot be combined" in capsys.readouterr().err


def test_resolve_cli_date_range_rejects_month_with_period(capsys):
    with pytest.raises(click.exceptions.Exit):
        _resolve(month="2024-04", period_flags={"next-month": True})

    assert "cannot be combined" in capsys.readouterr().err


def test_defaults_to_current_month():
    assert _resolve() == (date(2024, 3, 1), date(2024, 3, 31))


def test_period_flag():
    assert _resolve(period_flags={"next-month": True, "this-year": False}) == (
        date(2024, 4, 1),
        date(2024, 4, 30),
    )


def test_month_option():
    assert _resolve(month="2024-02") == (date(2024, 2, 1), date(2024, 2, 29))


def test_invalid_month(capsys):
    with pytest.raises(click.exceptions.Exit):
        _resolve(month="2024-13")

    assert "Invalid month" in capsys.readouterr().err


def test_start_date_alone_ends_with_current_month():
    assert _resolve(start_date="2024-03-05") == (date(2024, 3, 5), date(2024, 3, 31))


def test_explicit_dates():
    assert _resolve(start_date="2024-01-15", end_date="2024-02-15") == (
        date(2024, 1, 15),
        date(2024, 2, 15),
    )


def test_start_after_end(capsys):
    with pytest.raises(click.exceptions.Exit):
        _resolve(start_date="2024-05-01", end_date="2024-04-01")

    assert "must not be after" in capsys.readouterr().err


def test_invalid_start_date(capsys):
    with pytest.raises(click.exceptions.Exit):
        _resolve(start_date="not a date")

    assert "Invalid start date" in capsys.readouterr().err
