"""
Configuration helpers for the leaderboard backend.

Settings are read from environment variables once and cached; tests call
``get_settings.cache_clear()`` after changing the environment.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DATA_DIR = Path(__file__).resolve().parents[1] / "data"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    scores_file: Path
    profiles_file: Path
    leaderboard_page_size: int
    log_level: str


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    def _path(value: str | None, default: Path) -> Path:
        if not value or not value.strip():
            return default
        return Path(value.strip()).expanduser()

    page_size = _int(os.getenv("LEADERBOARD_PAGE_SIZE", "10"), 10)
    if page_size < 1:
        raise ValueError("LEADERBOARD_PAGE_SIZE must be >= 1")

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        scores_file=_path(os.getenv("SCORES_FILE"), DATA_DIR / "scores.json"),
        profiles_file=_path(os.getenv("PROFILES_FILE"), DATA_DIR / "profiles.json"),
        leaderboard_page_size=page_size,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
    )
