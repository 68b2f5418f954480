"""Initialize database command."""

import click

from ..db import get_db_path, init_db
from .base import async_command, echo_info, echo_success, get_cli_settings


@click.command()
@click.pass_context
@async_command
async def init(ctx: click.Context):
    """Initialize the fitgoal data directory and database.

    Safe to run more than once: the schema is only created if missing.
    """
    settings = get_cli_settings(ctx)
    echo_info(f"Initializing fitgoal in {settings.data_dir}")

    db_path = get_db_path(settings.data_dir)
    await init_db(db_path)
    echo_success(f"Database ready at {db_path}")

    click.echo()
    click.echo("Next steps:")
    click.echo("  fitgoal serve                                  # start the API")
    click.echo("  fitgoal generate current.jpg goal.jpg -f 4 -d 60")
