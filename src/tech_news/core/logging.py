"""Logging configuration for the service."""

from __future__ import annotations

import logging

from tech_news.core.settings import settings

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the process.

    Args:
        level: Log level name; defaults to ``settings.log_level``.
    """
    resolved = (level or settings.log_level).upper()
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    logging.getLogger("tech_news").setLevel(resolved)
    if settings.sql_debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.INFO)
