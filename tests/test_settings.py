# tests/test_settings.py
"""Tests for configuration and engine wiring."""

import logging

from tech_news.core.logging import configure_logging
from tech_news.core.settings import Settings
from tech_news.db.session import timeout_connect_args


def _settings(**env: object) -> Settings:
    return Settings(SECRET_KEY="k", **env)  # type: ignore[arg-type]


def test_effective_database_url_respects_test_override() -> None:
    """The test database is only used when explicitly enabled."""
    settings = _settings(DATABASE_URL="sqlite:///prod.db", TEST_DATABASE_URL="sqlite:///test.db")
    assert settings.effective_database_url == "sqlite:///prod.db"

    settings = _settings(
        DATABASE_URL="sqlite:///prod.db",
        TEST_DATABASE_URL="sqlite:///test.db",
        USE_TEST_DATABASE=True,
    )
    assert settings.effective_database_url == "sqlite:///test.db"


def test_timeout_connect_args() -> None:
    """Each driver gets its own way of bounding waits."""
    assert timeout_connect_args("sqlite://", 2.5) == {"check_same_thread": False, "timeout": 2.5}
    assert timeout_connect_args("postgresql+psycopg://db/news", 1.5) == {
        "options": "-c statement_timeout=1500"
    }
    assert timeout_connect_args("mysql://db/news", 3) == {}


def test_configure_logging_sets_package_level() -> None:
    """The package logger follows the requested level."""
    configure_logging("DEBUG")
    assert logging.getLogger("tech_news").level == logging.DEBUG
    configure_logging("INFO")
    assert logging.getLogger("tech_news").level == logging.INFO
