"""Prompting, parsing and orchestration of plan generation."""

from .generator import GenerationResult, WorkoutGenerator
from .parser import parse_workout_plan, serialize_workout_plan
from .prompts import build_workout_prompt

__all__ = [
    "build_workout_prompt",
    "GenerationResult",
    "parse_workout_plan",
    "serialize_workout_plan",
    "WorkoutGenerator",
]
