"""Database session configuration."""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from tech_news.core.settings import settings


class Base(DeclarativeBase):
    """Declarative base shared by all ORM models."""


# Ensure model modules are imported so that metadata is populated when create_all runs.
import tech_news.models  # noqa: E402,F401


def timeout_connect_args(url: str, timeout_seconds: float) -> dict[str, Any]:
    """Return driver arguments that bound lock waits and statement time."""
    if url.startswith("sqlite"):
        return {"check_same_thread": False, "timeout": timeout_seconds}
    if url.startswith("postgresql"):
        return {"options": f"-c statement_timeout={int(timeout_seconds * 1000)}"}
    return {}


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """Turn on FK enforcement so ON DELETE CASCADE applies on SQLite."""
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record) -> None:  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def build_engine(url: str, **kwargs: Any) -> Engine:
    """Create an engine with timeouts and SQLite FK enforcement applied."""
    connect_args = timeout_connect_args(url, settings.db_timeout_seconds)
    connect_args.update(kwargs.pop("connect_args", {}))
    engine = create_engine(url, connect_args=connect_args, **kwargs)
    enable_sqlite_foreign_keys(engine)
    return engine


engine = build_engine(
    settings.effective_database_url,
    pool_pre_ping=True,
    echo=settings.sql_debug,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Yield a database session for dependency injection."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def create_tables() -> None:
    """Create all database tables."""
    Base.metadata.create_all(bind=engine)
