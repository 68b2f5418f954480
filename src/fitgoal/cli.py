"""CLI entry point for fitgoal."""

import click

from . import __version__
from .commands import generate, history, init, serve, show
from .config import configure_logging, get_settings


@click.group()
@click.version_option(version=__version__, prog_name="fitgoal")
@click.pass_context
def main(ctx: click.Context):
    """fitgoal: AI workout plans from a current-body and a goal-body photo.

    Configuration is read from the environment (or a .env file);
    GEMINI_API_KEY is required for generation.

    Example usage:

        # Create the database
        fitgoal init

        # Run the HTTP API
        fitgoal serve

        # Generate from the command line
        fitgoal generate me.jpg goal.jpg --frequency 4 --duration 60

        # Recent plans
        fitgoal history
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    ctx.ensure_object(dict)
    ctx.obj["settings"] = settings


main.add_command(init)
main.add_command(serve)
main.add_command(generate)
main.add_command(history)
main.add_command(show)


def run():
    """Run the CLI."""
    main()


if __name__ == "__main__":
    run()
