"""Data models for fitgoal."""

from .plan import DayPlan, Exercise, WorkoutPlan
from .request import WorkoutRequest

__all__ = [
    "DayPlan",
    "Exercise",
    "WorkoutPlan",
    "WorkoutRequest",
]
