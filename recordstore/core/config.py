"""
Configuration helpers for the record store.

Everything the app needs from the environment is read here once, so that
routers/services never touch os.environ directly.
"""

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
import os

DEFAULT_DATA_FILE = Path(__file__).resolve().parents[1] / "data" / "records.json"


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    data_file: Path
    log_level: str
    log_json: bool
    cors_origins: tuple[str, ...]
    strict_create: bool


def _bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _csv(value: str | None) -> tuple[str, ...]:
    items = (item.strip().rstrip("/") for item in (value or "").split(","))
    return tuple(item for item in items if item)


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    data_file = (os.getenv("RECORDS_DATA_FILE") or "").strip()
    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").lower(),
        data_file=Path(data_file) if data_file else DEFAULT_DATA_FILE,
        log_level=(os.getenv("LOG_LEVEL") or "INFO").upper(),
        log_json=_bool(os.getenv("LOG_JSON"), False),
        cors_origins=_csv(os.getenv("CORS_ORIGINS")),
        strict_create=_bool(os.getenv("STRICT_CREATE"), False),
    )
