"""Database layer for fitgoal."""

from .engine import get_db_path, init_db
from .models import WorkoutRecord
from .repositories import WorkoutRepository

__all__ = [
    "get_db_path",
    "init_db",
    "WorkoutRecord",
    "WorkoutRepository",
]
