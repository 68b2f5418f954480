"""Database record definitions."""

from dataclasses import dataclass
from datetime import datetime

from ..models.plan import WorkoutPlan


@dataclass
class WorkoutRecord:
    """A stored workout plan."""

    id: int
    title: str
    analysis: str
    full_plan_json: str  # Source of truth; title and analysis are copies
    created_at: datetime | None
    plan: WorkoutPlan

    def to_dict(self) -> dict:
        """Convert to the history response shape."""
        return {
            "id": self.id,
            "title": self.title,
            "analysis": self.analysis,
            "full_plan_json": self.full_plan_json,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "plan": self.plan.to_dict(),
        }
