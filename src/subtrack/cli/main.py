"""Main CLI entry point."""

import logging

import click
from subtrack.database.factories import create_sqlite_database

# Import and register all commands at module level
from subtrack.cli.commands import (
    subscription,
    calendar,
    summary,
    backup,
    remind,
)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option(
    "--db-path",
    type=click.Path(),
    help="Path to database file (overrides SUBTRACK_DB_PATH environment variable)",
    envvar="SUBTRACK_DB_PATH",
)
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    default="WARNING",
    envvar="SUBTRACK_LOG_LEVEL",
    show_default=True,
    help="Logging level",
)
@click.pass_context
def cli(ctx, db_path: str | None, log_level: str):
    """Subtrack - Recurring payment tracker.

    Keep track of subscriptions, credit card statement and due dates, and
    bills, see them on a calendar and get a monthly cost overview.
    """
    ctx.ensure_object(dict)
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    # Initialize database connection only when actually running a command
    # (not when showing help)
    if ctx.invoked_subcommand is not None:
        db = create_sqlite_database(database_path=db_path)
        db.connect()
        db.initialize_schema()
        ctx.obj["db"] = db
        ctx.call_on_close(db.disconnect)


# Register all commands
subscription.register_commands(cli)
calendar.register_commands(cli)
summary.register_commands(cli)
backup.register_commands(cli)
remind.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
