"""Data access layer for fitgoal."""

import json
from datetime import datetime
from pathlib import Path

import aiosqlite

from ..agents.parser import serialize_workout_plan
from ..errors import StorageError
from ..models.plan import WorkoutPlan
from .engine import get_db_path
from .models import WorkoutRecord


class WorkoutRepository:
    """Repository for generated workout plans.

    Records are only ever appended; SQLite serializes concurrent inserts.
    """

    def __init__(self, db_path: Path | None = None):
        self.db_path = db_path or get_db_path()

    async def create(self, plan: WorkoutPlan) -> int:
        """Store a plan and return its new ID."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute(
                    """
                    INSERT INTO workouts (title, analysis, full_plan_json)
                    VALUES (?, ?, ?)
                    """,
                    (plan.title, plan.analysis, serialize_workout_plan(plan)),
                )
                await db.commit()
                return cursor.lastrowid
        except (aiosqlite.Error, OSError) as e:
            raise StorageError(f"Could not save workout plan: {e}") from e

    async def get(self, record_id: int) -> WorkoutRecord | None:
        """Get a stored plan by ID."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                cursor = await db.execute(
                    "SELECT * FROM workouts WHERE id = ?", (record_id,)
                )
                row = await cursor.fetchone()
        except (aiosqlite.Error, OSError) as e:
            raise StorageError(f"Could not read workout {record_id}: {e}") from e

        if row is None:
            return None
        return self._row_to_record(row)

    async def recent(self, limit: int = 5) -> list[WorkoutRecord]:
        """Get the most recent plans, newest first."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                db.row_factory = aiosqlite.Row
                cursor = await db.execute(
                    "SELECT * FROM workouts ORDER BY created_at DESC, id DESC LIMIT ?",
                    (max(limit, 0),),
                )
                rows = await cursor.fetchall()
        except (aiosqlite.Error, OSError) as e:
            raise StorageError(f"Could not read workout history: {e}") from e

        return [self._row_to_record(row) for row in rows]

    async def count(self) -> int:
        """Count stored plans."""
        try:
            async with aiosqlite.connect(self.db_path) as db:
                cursor = await db.execute("SELECT COUNT(*) FROM workouts")
                row = await cursor.fetchone()
        except (aiosqlite.Error, OSError) as e:
            raise StorageError(f"Could not count workouts: {e}") from e
        return row[0]

    def _row_to_record(self, row: aiosqlite.Row) -> WorkoutRecord:
        """Convert a database row to a WorkoutRecord."""
        try:
            plan = WorkoutPlan.from_dict(json.loads(row["full_plan_json"]))
        except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
            raise StorageError(f"Workout {row['id']} holds an invalid plan: {e}") from e

        return WorkoutRecord(
            id=row["id"],
            title=row["title"],
            analysis=row["analysis"],
            full_plan_json=row["full_plan_json"],
            created_at=datetime.fromisoformat(row["created_at"]) if row["created_at"] else None,
            plan=plan,
        )
