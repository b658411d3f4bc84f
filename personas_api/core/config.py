"""
Configuration helpers for the Personas backend.

Routers/services read a Settings object instead of fetching os.environ
directly, so tests can swap values with monkeypatch + cache_clear().
"""

from dataclasses import dataclass
from functools import lru_cache
import os


@dataclass(frozen=True)
class Settings:
    """Typed view of environment variables."""

    app_env: str
    database_url: str
    log_level: str
    log_format: str
    duplicate_document_status: int
    host: str
    port: int

    @property
    def docs_enabled(self) -> bool:
        return self.app_env == "dev"


@lru_cache
def get_settings() -> Settings:
    """Read the current environment and build a Settings instance."""
    def _int(value: str, default: int = 0) -> int:
        try:
            return int(value)
        except (TypeError, ValueError):
            return default

    return Settings(
        app_env=(os.getenv("APP_ENV") or "dev").strip().lower(),
        database_url=(os.getenv("DATABASE_URL") or "sqlite://").strip(),
        log_level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
        log_format=(os.getenv("LOG_FORMAT") or "text").strip().lower(),
        duplicate_document_status=_int(os.getenv("DUPLICATE_DOCUMENT_STATUS", "200"), 200),
        host=os.getenv("HOST", "127.0.0.1"),
        port=_int(os.getenv("PORT", "8000"), 8000),
    )
