"""Backup export and import commands."""

import click
from subtrack.cli.error_handling import handle_domain_error
from subtrack.domain.backup import BackupService
from subtrack.domain.errors import DomainError


@click.group()
def backup_group():
    """Export or import subscriptions as JSON."""
    pass


@backup_group.command("export")
@click.argument("output", type=click.File("w", encoding="utf-8"))
@click.pass_context
def export_backup(ctx, output):
    """Write all subscriptions to OUTPUT ('-' for stdout)."""
    db = ctx.obj["db"]
    service = BackupService(db)

    count = service.export_data(output)
    if output.name != "<stdout>":
        click.echo(f"Exported {count} subscription(s) to {output.name}")


@backup_group.command("import")
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.pass_context
def import_backup(ctx, source):
    """Create subscriptions from a JSON backup in SOURCE.

    Records without a name or type are skipped. Imported subscriptions get
    new IDs and are added after the existing ones.
    """
    db = ctx.obj["db"]
    service = BackupService(db)

    try:
        result = service.import_data(source)
    except DomainError as e:
        handle_domain_error(ctx, e)

    click.echo(f"Imported {result.imported} subscription(s)")
    if result.skipped:
        click.echo(f"Skipped {result.skipped} record(s) without name or type")
    if result.failed:
        click.echo(f"Failed to import {result.failed} record(s)")


def register_commands(cli: click.Group) -> None:
    """Register backup commands with main CLI."""
    cli.add_command(backup_group, name="backup")
