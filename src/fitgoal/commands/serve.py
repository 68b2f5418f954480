"""Web server command."""

import click

from .base import get_cli_settings


@click.command()
@click.option("--host", default=None, help="Host to bind to (default: $HOST or 0.0.0.0)")
@click.option("--port", "-p", default=None, type=int, help="Port to bind to (default: $PORT or 3000)")
@click.option("--reload", is_flag=True, help="Enable auto-reload for development")
@click.pass_context
def serve(ctx: click.Context, host: str | None, port: int | None, reload: bool):
    """Start the API server.

    The database schema is created on startup if it does not exist.

    Examples:

        # Start on $PORT (default 3000)
        fitgoal serve

        # Local only, custom port
        fitgoal serve --host 127.0.0.1 --port 8000

        # Development mode with auto-reload
        fitgoal serve --reload
    """
    import uvicorn

    from ..web import create_app

    settings = get_cli_settings(ctx)
    host = host or settings.host
    port = port or settings.port

    click.echo()
    click.echo(click.style("Starting fitgoal API server...", fg="green"))
    click.echo(f"  Listening on http://{host}:{port}")
    click.echo()

    # Reload mode re-imports the factory, which reads settings from the environment
    uvicorn.run(
        create_app(settings) if not reload else "fitgoal.web:create_app",
        host=host,
        port=port,
        reload=reload,
        factory=reload,
        log_level=settings.log_level.lower(),
    )
