"""Startup validation and bootstrap helpers."""

from __future__ import annotations

import logging

from mindos.core.config import get_config
from mindos.core.logging_config import configure_logging
from mindos.database.db import get_active_database_url, init_db, verify_database_connection

logger = logging.getLogger(__name__)


def validate_startup_config() -> None:
    """Fail-fast config and connectivity checks."""
    config = get_config()
    if not verify_database_connection():
        raise RuntimeError("Database connectivity check failed.")

    active_database_url = get_active_database_url()
    if config.is_production and active_database_url.startswith("sqlite"):
        logger.warning(
            "startup.production.sqlite_detected",
            extra={"event": "startup.production.sqlite_detected"},
        )
    if not config.ai_enabled:
        logger.warning(
            "startup.ai.disabled",
            extra={"event": "startup.ai.disabled"},
        )

    logger.info(
        "startup.config.validated",
        extra={
            "event": "startup.config.validated",
            "env": config.ENV,
            "database_url_scheme": active_database_url.split("://", 1)[0],
            "ai_enabled": config.ai_enabled,
        },
    )


def bootstrap() -> None:
    """Initialize logging, validate runtime configuration, and create tables."""
    configure_logging()
    validate_startup_config()
    init_db()
