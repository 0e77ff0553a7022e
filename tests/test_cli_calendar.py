"""Tests for the calendar command."""


def run_calendar(invoke_cli, *args):
    return invoke_cli("calendar", *args)


def test_calendar_month(invoke_cli, sample_subscriptions):
    result = run_calendar(invoke_cli, "--month", "2024-04")

    assert result.exit_code == 0, result.output
    assert "Calendar 2024-04-01 to 2024-04-30: 5 event(s)" in result.output
    assert "2024-04-30 Tue" in result.output
    assert "Statement  Visa Card - Statement" in result.output
    assert "Due        Visa Card - Due" in result.output
    assert "$ 120.00" in result.output


def test_calendar_february_clamp(invoke_cli, sample_subscriptions):
    result = run_calendar(invoke_cli, "--month", "2023-02", "--search", "netflix")

    assert result.exit_code == 0, result.output
    assert "1 event(s)" in result.output
    assert "2023-02-28" in result.output


def test_calendar_filters(invoke_cli, sample_subscriptions):
    result = run_calendar(
        invoke_cli, "--month", "2024-04", "--payments-only", "--category", "Banking"
    )

    assert result.exit_code == 0, result.output
    assert "1 event(s)" in result.output
    assert "Visa Card - Due" in result.output
    assert "Visa Card - Statement" not in result.output


def test_calendar_no_events(invoke_cli):
    result = run_calendar(invoke_cli, "--month", "2024-04")

    assert result.exit_code == 0, result.output
    assert "No events found." in result.output


def test_calendar_all_days(invoke_cli):
    result = run_calendar(invoke_cli, "--month", "2024-02", "--all-days")

    assert result.exit_code == 0, result.output
    assert "2024-02-29 Thu" in result.output


def test_calendar_grid(invoke_cli, sample_subscriptions):
    result = run_calendar(invoke_cli, "--month", "2024-03", "--grid")

    assert result.exit_code == 0, result.output
    assert "Calendar 2024-02-26 to 2024-04-07" in result.output
    assert "2024-04-01" in result.output


def test_calendar_explicit_window(invoke_cli, sample_subscriptions):
    result = run_calendar(
        invoke_cli, "--start-date", "2024-04-01", "--end-date", "2024-04-09"
    )

    assert result.exit_code == 0, result.output
    assert "Calendar 2024-04-01 to 2024-04-09: 1 event(s)" in result.output
    assert "Rent" in result.output


def test_calendar_rejects_conflicting_options(invoke_cli):
    result = run_calendar(invoke_cli, "--month", "2024-04", "--next-month")

    assert result.exit_code == 1
    assert "cannot be combined" in result.output


def test_calendar_skips_inactive(invoke_cli, subscription_service, sample_subscriptions):
    subscription_service.toggle_active(sample_subscriptions["Rent"].id)

    result = run_calendar(invoke_cli, "--month", "2024-04", "--search", "rent")

    assert "No events found." in result.output
