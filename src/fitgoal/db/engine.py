"""Database engine setup and initialization."""

import logging
from pathlib import Path

import aiosqlite

from ..config import DB_FILENAME, DEFAULT_DATA_DIR
from ..errors import StorageError

logger = logging.getLogger(__name__)


def get_db_path(data_dir: Path | None = None) -> Path:
    """Get the database file path, creating the data directory if needed."""
    if data_dir is None:
        data_dir = DEFAULT_DATA_DIR
    data_dir.mkdir(parents=True, exist_ok=True)
    return data_dir / DB_FILENAME


async def init_db(db_path: Path | None = None) -> None:
    """Create the database schema if it does not exist yet."""
    if db_path is None:
        db_path = get_db_path()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    try:
        async with aiosqlite.connect(db_path) as db:
            # Generated plans, append-only
            await db.execute("""
                CREATE TABLE IF NOT EXISTS workouts (
                    id INTEGER PRIMARY KEY AUTOINCREMENT,
                    title TEXT,
                    analysis TEXT,
                    full_plan_json TEXT,
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                )
            """)

            await db.execute("""
                CREATE INDEX IF NOT EXISTS idx_workouts_created
                ON workouts(created_at DESC, id DESC)
            """)

            await db.commit()
    except (aiosqlite.Error, OSError) as e:
        raise StorageError(f"Could not initialize database at {db_path}: {e}") from e

    logger.info("Database ready at %s", db_path)
