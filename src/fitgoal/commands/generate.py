"""Generate plan command."""

import base64
import mimetypes
from pathlib import Path

import click

from ..agents import WorkoutGenerator
from ..clients import GeminiPlanClient
from ..db import WorkoutRepository
from ..errors import FitGoalError
from ..models.request import WorkoutRequest
from .base import async_command, echo_error, echo_info, echo_success, ensure_initialized, get_cli_settings


def _encode_image(path: Path) -> str:
    """Read an image file as a data URI."""
    mime_type, _ = mimetypes.guess_type(path.name)
    if not mime_type or not mime_type.startswith("image/"):
        mime_type = "image/jpeg"
    payload = base64.b64encode(path.read_bytes()).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


@click.command()
@click.argument("current_image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("goal_image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--frequency",
    "-f",
    type=click.IntRange(1, 7),
    default=4,
    help="Training days per week (default: 4)",
)
@click.option(
    "--duration",
    "-d",
    type=click.IntRange(10, 240),
    default=60,
    help="Minutes per session (default: 60)",
)
@click.pass_context
@async_command
async def generate(ctx, current_image: Path, goal_image: Path, frequency: int, duration: int):
    """Generate a workout plan from two photos.

    CURRENT_IMAGE is a photo of your body today, GOAL_IMAGE a photo of the
    body you are aiming for. The plan is saved like one made through the API.

    Examples:

        fitgoal generate me.jpg goal.png

        fitgoal generate me.jpg goal.png --frequency 5 --duration 45
    """
    ensure_initialized(ctx)
    settings = get_cli_settings(ctx)

    generator = WorkoutGenerator(
        GeminiPlanClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            timeout=settings.gemini_timeout,
        ),
        WorkoutRepository(settings.db_path),
    )
    request = WorkoutRequest(
        current_image=_encode_image(current_image),
        goal_image=_encode_image(goal_image),
        frequency=frequency,
        duration=duration,
    )

    echo_info(f"Generating plan: {frequency} days/week, {duration} min/session")
    try:
        result = await generator.generate(request)
    except FitGoalError as e:
        echo_error(f"Failed to generate plan: {e}")
        ctx.exit(1)

    echo_success(f"Plan generated (ID: {result.record_id})")
    click.echo()
    click.echo("=" * 60)
    click.echo(result.plan.get_summary())
    click.echo("=" * 60)
