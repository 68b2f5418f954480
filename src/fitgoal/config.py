"""Runtime configuration loaded from the environment."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

# Default locations, relative to the working directory the server starts in
DEFAULT_DATA_DIR = Path("data")
DEFAULT_STATIC_DIR = Path("public")
DEFAULT_MODEL = "gemini-2.5-flash"
DB_FILENAME = "fitgoal.db"

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


@dataclass
class Settings:
    """Process-wide settings, built once at startup."""

    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_MODEL
    gemini_timeout: float = 60.0
    host: str = "0.0.0.0"
    port: int = 3000
    data_dir: Path = DEFAULT_DATA_DIR
    static_dir: Path = DEFAULT_STATIC_DIR
    api_token: str | None = None
    history_limit: int = 5
    log_level: str = "INFO"

    @property
    def db_path(self) -> Path:
        """Path of the SQLite database file."""
        return self.data_dir / DB_FILENAME

    @classmethod
    def from_env(cls) -> "Settings":
        """Build settings from environment variables (and a .env file)."""
        load_dotenv()
        return cls(
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_MODEL),
            gemini_timeout=float(os.getenv("GEMINI_TIMEOUT", "60")),
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "3000")),
            data_dir=Path(os.getenv("FITGOAL_DATA_DIR", str(DEFAULT_DATA_DIR))),
            static_dir=Path(os.getenv("FITGOAL_STATIC_DIR", str(DEFAULT_STATIC_DIR))),
            api_token=os.getenv("FITGOAL_API_TOKEN") or None,
            history_limit=int(os.getenv("FITGOAL_HISTORY_LIMIT", "5")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )


def get_settings() -> Settings:
    """Get settings for the current process."""
    return Settings.from_env()


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the CLI and the server."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
