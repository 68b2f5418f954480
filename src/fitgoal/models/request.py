"""Incoming plan generation request."""

from dataclasses import dataclass
from typing import Any

from ..errors import ValidationError

Preference = str | int | float | None


@dataclass
class WorkoutRequest:
    """The two photos and training preferences sent by a caller."""

    current_image: str  # base64, optionally data-URI prefixed
    goal_image: str
    frequency: Preference = None  # days per week
    duration: Preference = None  # minutes per session

    @classmethod
    def from_payload(cls, payload: Any) -> "WorkoutRequest":
        """Build a request from a form or JSON body.

        Raises:
            ValidationError: If the body is not an object or an image is missing
        """
        if not hasattr(payload, "get"):
            raise ValidationError("Request body must be an object.")

        current_image = payload.get("currentImage")
        goal_image = payload.get("goalImage")
        if not current_image or not goal_image:
            raise ValidationError("Both currentImage and goalImage are required.")
        if not isinstance(current_image, str) or not isinstance(goal_image, str):
            raise ValidationError("Images must be sent as base64 strings.")

        return cls(
            current_image=current_image,
            goal_image=goal_image,
            frequency=_preference(payload.get("frequency")),
            duration=_preference(payload.get("duration")),
        )


def _preference(value: Any) -> Preference:
    """Keep scalar preference values, drop anything else."""
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (str, int, float)):
        return value
    return None
