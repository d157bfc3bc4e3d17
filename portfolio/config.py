"""Application settings, read from the environment and ``.env`` files."""

from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings

_PROJECT_DIR = Path(__file__).resolve().parents[1]
_ENV_FILES = (
    _PROJECT_DIR / ".env",
    ".env",
)


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    app_title: str = "Portfolio API"
    app_version: str = "0.1.0"
    app_env: str = "development"
    database_url: str = "sqlite:///./portfolio.db"
    cors_origins: list[str] = ["http://localhost:3000"]

    # Owner session: the bearer credential and the scope it is bound to
    owner_token: str = ""
    owner_scope: str = "owner"

    # Per-category log levels (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    log_level: str = "INFO"                  # Root / app-wide
    log_level_sql: str = "WARNING"           # sqlalchemy.engine, DEBUG echoes SQL
    log_level_http: str = "WARNING"          # httpx / httpcore
    log_level_uvicorn: str = "INFO"          # uvicorn.access / uvicorn.error
    log_level_sync: str = "INFO"             # PersistenceSynchronizer and editors
    log_file: str | None = None              # optional rotating log file

    model_config = {
        "env_file": _ENV_FILES,
        "env_file_encoding": "utf-8",
    }


@lru_cache
def get_settings() -> Settings:
    """Cached settings instance; reads .env once."""
    return Settings()
