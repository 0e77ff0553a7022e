"""CLI error handling helpers."""

import logging

import click

from subtrack.domain.errors import DomainError

logger = logging.getLogger(__name__)


def fail(ctx: click.Context, message: str) -> None:
    """Print an error message to stderr and exit with status 1."""
    click.echo(f"Error: {message}", err=True)
    ctx.exit(1)


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    logger.debug("Command %s failed", ctx.command_path, exc_info=error)
    fail(ctx, str(error))
