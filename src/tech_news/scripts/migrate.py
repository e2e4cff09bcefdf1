# src/tech_news/scripts/migrate.py
"""Apply Alembic migrations up to head."""
from __future__ import annotations

import logging
import os

from alembic import command
from alembic.config import Config

from tech_news.core.logging import configure_logging
from tech_news.core.settings import settings

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = os.path.abspath(
    os.path.join(os.path.dirname(__file__), "..", "..", "..", "migrations")
)


def build_alembic_config() -> Config:
    """Return an Alembic config pointed at the project's migrations."""
    cfg = Config(os.path.join(MIGRATIONS_DIR, "alembic.ini"))
    cfg.set_main_option("script_location", MIGRATIONS_DIR)
    cfg.set_main_option("sqlalchemy.url", settings.effective_database_url)
    return cfg


def run_upgrade_head() -> None:
    """Upgrade the configured database to the latest revision."""
    command.upgrade(build_alembic_config(), "head")
    logger.info("Database upgraded to head")


if __name__ == "__main__":
    configure_logging()
    run_upgrade_head()
