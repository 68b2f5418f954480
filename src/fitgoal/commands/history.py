"""Stored plan commands."""

import click

from ..db import WorkoutRepository
from ..errors import StorageError
from .base import async_command, echo_error, echo_info, ensure_initialized, format_table, get_cli_settings


@click.command()
@click.option("--limit", "-n", type=click.IntRange(min=1), default=None, help="Number of plans to list")
@click.pass_context
@async_command
async def history(ctx, limit: int | None):
    """List the most recently generated plans."""
    ensure_initialized(ctx)
    settings = get_cli_settings(ctx)
    repo = WorkoutRepository(settings.db_path)

    try:
        records = await repo.recent(limit or settings.history_limit)
    except StorageError as e:
        echo_error(str(e))
        ctx.exit(1)

    if not records:
        echo_info("No plans yet. Generate one with 'fitgoal generate'")
        return

    headers = ["ID", "Title", "Days", "Created"]
    rows = []
    for record in records:
        created = record.created_at.strftime("%Y-%m-%d %H:%M") if record.created_at else "N/A"
        title = record.title or ""
        rows.append([
            str(record.id),
            title[:40] + "..." if len(title) > 40 else title,
            str(record.plan.days_per_week),
            created,
        ])

    click.echo()
    click.echo(format_table(headers, rows))


@click.command()
@click.argument("record_id", type=int)
@click.pass_context
@async_command
async def show(ctx, record_id: int):
    """Show a stored plan."""
    ensure_initialized(ctx)
    settings = get_cli_settings(ctx)
    repo = WorkoutRepository(settings.db_path)

    try:
        record = await repo.get(record_id)
    except StorageError as e:
        echo_error(str(e))
        ctx.exit(1)

    if record is None:
        echo_error(f"Plan ID {record_id} not found")
        ctx.exit(1)

    click.echo()
    click.echo(f"Plan {record.id} - created {record.created_at}")
    click.echo("=" * 60)
    click.echo(record.plan.get_summary())
