# tests/test_security.py
"""Tests for token and password helpers."""

from datetime import UTC, datetime, timedelta

from jose import jwt

from tech_news.core.security import (
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from tech_news.core.settings import settings


def test_access_token_round_trip() -> None:
    """A freshly issued token decodes to the same user id."""
    token = create_access_token(42)
    assert decode_access_token(token) == 42


def test_decode_rejects_garbage_and_foreign_tokens() -> None:
    """Malformed tokens and tokens signed with another key are refused."""
    assert decode_access_token("garbage") is None
    foreign = jwt.encode({"sub": "1"}, "some-other-secret", algorithm=settings.jwt_algorithm)
    assert decode_access_token(foreign) is None


def test_decode_rejects_expired_token() -> None:
    """Expired tokens no longer identify a user."""
    expired = jwt.encode(
        {"sub": "7", "exp": datetime.now(UTC) - timedelta(minutes=5)},
        settings.secret_key,
        algorithm=settings.jwt_algorithm,
    )
    assert decode_access_token(expired) is None


def test_decode_rejects_non_numeric_subject() -> None:
    """Only integer user ids are accepted as subjects."""
    token = jwt.encode({"sub": "alice"}, settings.secret_key, algorithm=settings.jwt_algorithm)
    assert decode_access_token(token) is None


def test_password_hashes_are_salted() -> None:
    """Hashing the same password twice yields different hashes."""
    first = hash_password("password1234")
    second = hash_password("password1234")
    assert first != second
    assert verify_password("password1234", first)
    assert verify_password("password1234", second)
