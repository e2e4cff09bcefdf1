# src/tech_news/scripts/init_db.py
"""Create all tables directly from model metadata (local development)."""
from __future__ import annotations

import logging

from tech_news.core.logging import configure_logging
from tech_news.db.session import create_tables

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()
    logger.info("Database initialized")


if __name__ == "__main__":
    configure_logging()
    init_db()
