"""Parsing of model output into workout plans."""

import json
import logging
import re

from ..errors import ParseError
from ..models.plan import WorkoutPlan

logger = logging.getLogger(__name__)

# JSON mode normally answers bare JSON, but some models still wrap it in a fence
_CODE_FENCE = re.compile(r"^```(?:json)?\s*(.*?)\s*```$", re.DOTALL)


def _strip_code_fence(text: str) -> str:
    match = _CODE_FENCE.match(text.strip())
    if match:
        return match.group(1)
    return text


def parse_workout_plan(text: str) -> WorkoutPlan:
    """Parse and validate raw model output.

    Args:
        text: Response text expected to hold a JSON plan

    Returns:
        The validated WorkoutPlan

    Raises:
        ParseError: If the text is not JSON or does not match the plan schema
    """
    try:
        data = json.loads(_strip_code_fence(text or ""))
    except (ValueError, RecursionError) as e:
        logger.warning("Model output is not JSON: %r", (text or "")[:200])
        raise ParseError(f"Model output is not valid JSON: {e}") from e

    try:
        return WorkoutPlan.from_dict(data)
    except KeyError as e:
        raise ParseError(f"Model output is missing field {e}") from e
    except (TypeError, ValueError) as e:
        raise ParseError(f"Model output does not match the plan schema: {e}") from e


def serialize_workout_plan(plan: WorkoutPlan) -> str:
    """Serialize a plan to the JSON text stored in the database."""
    return plan.to_json()
