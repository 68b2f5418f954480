"""Workout generation and history routes."""

import secrets
from typing import Any

from fastapi import APIRouter, Depends, Request
from starlette.exceptions import HTTPException

from ...agents import WorkoutGenerator
from ...db.repositories import WorkoutRepository
from ...errors import AuthError, ValidationError
from ...models.request import WorkoutRequest

router = APIRouter(prefix="/api", tags=["workouts"])

# Base64 inflates a 5 MB photo to about 7 MB
MAX_FIELD_SIZE = 10 * 1024 * 1024


def get_generator(request: Request) -> WorkoutGenerator:
    """Get the pipeline from app state."""
    return request.app.state.generator


def get_repository(request: Request) -> WorkoutRepository:
    """Get the workout store from app state."""
    return request.app.state.repository


def require_caller(request: Request) -> None:
    """Check the bearer token when one is configured."""
    token = request.app.state.settings.api_token
    if not token:
        return

    header = request.headers.get("authorization", "")
    scheme, _, presented = header.partition(" ")
    # compare_digest only accepts ASCII str, headers arrive latin-1 decoded
    matches = secrets.compare_digest(presented.encode(), token.encode())
    if scheme.lower() != "bearer" or not matches:
        raise AuthError("Missing or invalid bearer token")


async def _read_payload(request: Request) -> Any:
    """Read a JSON or form body."""
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            return await request.json()
        except ValueError as e:
            raise ValidationError("Request body is not valid JSON.") from e
    try:
        return await request.form(max_part_size=MAX_FIELD_SIZE)
    except HTTPException as e:
        raise ValidationError(f"Request form could not be read: {e.detail}") from e


@router.post("/generate-workout", dependencies=[Depends(require_caller)])
async def generate_workout(
    request: Request,
    generator: WorkoutGenerator = Depends(get_generator),
):
    """Generate a plan from two photos and store it.

    Accepts `currentImage`, `goalImage`, `frequency` and `duration` as a form
    or a JSON body and returns the plan JSON.
    """
    payload = await _read_payload(request)
    workout_request = WorkoutRequest.from_payload(payload)

    result = await generator.generate(workout_request)
    return result.plan.to_dict()


@router.get("/history")
async def history(
    request: Request,
    repository: WorkoutRepository = Depends(get_repository),
):
    """List the most recent plans, newest first."""
    limit = request.app.state.settings.history_limit
    records = await repository.recent(limit)
    return [record.to_dict() for record in records]
