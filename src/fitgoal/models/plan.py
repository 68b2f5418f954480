"""Workout plan data models."""

import json
from dataclasses import dataclass, field


def _require_str(data: dict, key: str) -> str:
    """Get a required string field from a mapping."""
    value = data[key]
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string, got {type(value).__name__}")
    return value


@dataclass
class Exercise:
    """An exercise within a training day."""

    name: str
    sets: str  # Free text, e.g. "4x12" or "3x to failure"

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {"name": self.name, "sets": self.sets}

    @classmethod
    def from_dict(cls, data: dict) -> "Exercise":
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise TypeError("exercise must be an object")
        sets = data["sets"]
        # Models sometimes answer with a bare number of sets
        if isinstance(sets, (int, float)) and not isinstance(sets, bool):
            sets = str(sets)
        if not isinstance(sets, str):
            raise TypeError("'sets' must be a string")
        return cls(name=_require_str(data, "name"), sets=sets)


@dataclass
class DayPlan:
    """A single training day."""

    day: str  # Label such as "Day 1"
    focus: str  # e.g. "Chest and Triceps"
    exercises: list[Exercise] = field(default_factory=list)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "day": self.day,
            "focus": self.focus,
            "exercises": [ex.to_dict() for ex in self.exercises],
        }

    @classmethod
    def from_dict(cls, data: dict) -> "DayPlan":
        """Create from dictionary."""
        if not isinstance(data, dict):
            raise TypeError("schedule entry must be an object")
        exercises = data["exercises"]
        if not isinstance(exercises, list):
            raise TypeError("'exercises' must be a list")
        return cls(
            day=_require_str(data, "day"),
            focus=_require_str(data, "focus"),
            exercises=[Exercise.from_dict(ex) for ex in exercises],
        )


@dataclass
class WorkoutPlan:
    """A complete workout plan produced by the model."""

    title: str
    analysis: str  # Comparison of the current body against the goal
    schedule: list[DayPlan]

    def to_dict(self) -> dict:
        """Convert to dictionary for storage and responses."""
        return {
            "title": self.title,
            "analysis": self.analysis,
            "schedule": [day.to_dict() for day in self.schedule],
        }

    def to_json(self) -> str:
        """Serialize to JSON text."""
        return json.dumps(self.to_dict(), ensure_ascii=False)

    @classmethod
    def from_dict(cls, data: dict) -> "WorkoutPlan":
        """Create from dictionary.

        Raises:
            KeyError: If a required field is missing
            TypeError: If a field has the wrong type
            ValueError: If the schedule is empty
        """
        if not isinstance(data, dict):
            raise TypeError("plan must be an object")
        schedule = data["schedule"]
        if not isinstance(schedule, list):
            raise TypeError("'schedule' must be a list")
        if not schedule:
            raise ValueError("'schedule' must not be empty")
        return cls(
            title=_require_str(data, "title"),
            analysis=_require_str(data, "analysis"),
            schedule=[DayPlan.from_dict(day) for day in schedule],
        )

    @property
    def days_per_week(self) -> int:
        """Number of training days in the schedule."""
        return len(self.schedule)

    def get_summary(self) -> str:
        """Generate a text summary of the plan."""
        summary = f"Plan: {self.title}\n"
        summary += f"Analysis: {self.analysis}\n"
        summary += f"Days: {self.days_per_week}\n\n"

        for day in self.schedule:
            summary += f"{day.day}"
            if day.focus:
                summary += f" - {day.focus}"
            summary += ":\n"
            for ex in day.exercises:
                summary += f"  - {ex.name}: {ex.sets}\n"
            summary += "\n"

        return summary
