"""Alembic environment for the Tech News schema."""
from __future__ import annotations

import os
import sys
from logging.config import fileConfig
from pathlib import Path

from alembic import context
from sqlalchemy import engine_from_config, pool

SRC_ROOT = Path(__file__).resolve().parents[1] / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from tech_news.core.settings import settings  # noqa: E402
from tech_news.db.session import Base  # noqa: E402

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name, disable_existing_loggers=False)


def database_url() -> str:
    """Pick the target database: ALEMBIC_URL, then the ini/caller URL, then settings."""
    url = os.getenv("ALEMBIC_URL") or config.get_main_option("sqlalchemy.url")
    return url or settings.effective_database_url


def configure_context(url: str, **kwargs) -> None:  # type: ignore[no-untyped-def]
    # SQLite cannot ALTER constraints in place; batch mode rebuilds the table.
    context.configure(
        target_metadata=Base.metadata,
        include_object=lambda obj, name, type_, reflected, compare_to: not (
            type_ == "table" and name == "alembic_version"
        ),
        render_as_batch=url.startswith("sqlite"),
        **kwargs,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_offline(url: str) -> None:
    """Emit SQL for the ``--sql`` mode without connecting."""
    configure_context(url, url=url, literal_binds=True, dialect_opts={"paramstyle": "named"})


def run_online(url: str) -> None:
    """Apply migrations over a live connection."""
    config.set_main_option("sqlalchemy.url", url)
    connectable = engine_from_config(
        config.get_section(config.config_ini_section, {}),
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )
    with connectable.connect() as connection:
        configure_context(url, connection=connection)


if context.is_offline_mode():
    run_offline(database_url())
else:
    run_online(database_url())
