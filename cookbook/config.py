"""
Configuration for the cookbook package.

Backends and the service factory read their settings from here so that the
rest of the code never touches ``os.environ`` directly.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    use_db: bool
    recipes_file: str
    mongo_uri: str
    mongo_database: str
    recipes_collection: str
    mongo_timeout_ms: int
    log_level: str


def _int(value: str | None, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _level(value: str | None, default: str) -> str:
    level = (value or "").strip().upper()
    return level if level in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} else default


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    return Settings(
        use_db=_bool(os.getenv("USE_DB")),
        recipes_file=os.getenv("RECIPES_FILE", "recipes.json"),
        mongo_uri=os.getenv("MONGO_URI", "mongodb://localhost:27017"),
        mongo_database=os.getenv("MONGO_DATABASE", "cookbook"),
        recipes_collection=os.getenv("RECIPES_COLLECTION", "recipes"),
        mongo_timeout_ms=_int(os.getenv("MONGO_TIMEOUT_MS"), 5000),
        log_level=_level(os.getenv("LOG_LEVEL"), "INFO"),
    )


__all__ = ["Settings", "get_settings"]
