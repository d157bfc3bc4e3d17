"""Centralized logging configuration.

Each log category maps one or more logger names to a ``log_level_*``
field on Settings, so the synchronizer's per-call chatter or SQL echo can
be turned up without flooding everything else.

Usage:
    from portfolio.infrastructure.logging.log_config import setup_logging
    setup_logging()   # once, from the FastAPI lifespan
"""

import logging
import os
import sys
from logging.handlers import RotatingFileHandler

from portfolio.config import Settings, get_settings

_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

_CATEGORY_MAP: dict[str, list[str]] = {
    "log_level_sql": [
        "sqlalchemy.engine",
        "sqlalchemy.pool",
        "aiosqlite",
    ],
    "log_level_http": [
        "httpx",
        "httpcore",
    ],
    "log_level_uvicorn": [
        "uvicorn",
        "uvicorn.access",
        "uvicorn.error",
    ],
    "log_level_sync": [
        "portfolio.sync",
        "portfolio.application.services.collection_editor",
        "portfolio.infrastructure.http",
    ],
}


def setup_logging(settings: Settings | None = None) -> None:
    """Apply the root level, install handlers and set every category level."""
    settings = settings or get_settings()

    root = logging.getLogger()
    root.setLevel(_parse_level(settings.log_level))
    _install_handlers(root, settings)

    for settings_field, logger_names in _CATEGORY_MAP.items():
        level = _parse_level(getattr(settings, settings_field, "INFO"))
        for name in logger_names:
            logging.getLogger(name).setLevel(level)

    logging.getLogger(__name__).debug(
        "Logging configured: root=%s sql=%s http=%s uvicorn=%s sync=%s",
        settings.log_level,
        settings.log_level_sql,
        settings.log_level_http,
        settings.log_level_uvicorn,
        settings.log_level_sync,
    )


def _install_handlers(root: logging.Logger, settings: Settings) -> None:
    formatter = logging.Formatter(_FORMAT)

    # uvicorn usually installs a handler; tests and scripts may not
    if not root.handlers:
        console = logging.StreamHandler(sys.stderr)
        console.setFormatter(formatter)
        root.addHandler(console)

    if settings.log_file and not any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == os.path.abspath(settings.log_file)
        for h in root.handlers
    ):
        file_handler = RotatingFileHandler(
            settings.log_file, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)


def _parse_level(raw: str) -> int:
    """Convert a level name string to a logging constant, defaulting to INFO."""
    numeric = getattr(logging, raw.upper(), None)
    if isinstance(numeric, int):
        return numeric
    return logging.INFO
