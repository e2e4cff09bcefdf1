"""Data access helpers for user accounts."""
from __future__ import annotations

import re
from typing import Any

from sqlalchemy import select
from sqlalchemy.orm import Session

from tech_news.core.security import hash_password
from tech_news.core.settings import settings
from tech_news.models.user import User
from tech_news.services.errors import UserNotFound, ValidationFailure

__all__ = ["UserRepository", "prepare_user_fields"]

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")
_UPDATABLE_FIELDS = frozenset({"username", "email", "password"})


def prepare_user_fields(fields: dict[str, Any]) -> dict[str, Any]:
    """Validate user fields and hash the password before any write.

    Only keys present in ``fields`` are checked, so the same step serves
    both creation and partial updates.

    Raises:
        ValidationFailure: On a blank username, malformed email or short password.
    """
    prepared = dict(fields)
    if "username" in prepared:
        username = (prepared["username"] or "").strip()
        if not username:
            raise ValidationFailure("Username must not be empty")
        prepared["username"] = username
    if "email" in prepared:
        email = (prepared["email"] or "").strip()
        if not _EMAIL_RE.match(email):
            raise ValidationFailure(f"Invalid email address: {email!r}")
        prepared["email"] = email
    if "password" in prepared:
        password = prepared["password"] or ""
        if len(password) < settings.password_min_length:
            raise ValidationFailure(
                f"Password must be at least {settings.password_min_length} characters"
            )
        prepared["password"] = hash_password(password)
    return prepared


class UserRepository:
    """Thin wrapper around database access for users."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by identifier."""
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> User | None:
        """Return the user registered under an email address."""
        stmt = select(User).where(User.email == email.strip())
        return self.session.execute(stmt).scalars().first()

    def create(self, *, username: str, email: str, password: str) -> User:
        """Insert a user; the password is hashed before it reaches the row."""
        fields = prepare_user_fields(
            {"username": username, "email": email, "password": password}
        )
        if self.get_by_email(fields["email"]) is not None:
            raise ValidationFailure(f"Email already registered: {fields['email']}")

        user = User(**fields)
        self.session.add(user)
        self.session.flush()
        return user

    def update(self, user_id: int, **changes: Any) -> User:
        """Apply profile changes; a new password is re-hashed."""
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValidationFailure(f"Unknown user fields: {', '.join(sorted(unknown))}")

        user = self.get_by_id(user_id)
        if user is None:
            raise UserNotFound(user_id)

        fields = prepare_user_fields(changes)
        new_email = fields.get("email")
        if new_email is not None and new_email != user.email:
            other = self.get_by_email(new_email)
            if other is not None and other.id != user.id:
                raise ValidationFailure(f"Email already registered: {new_email}")

        for name, value in fields.items():
            setattr(user, name, value)
        self.session.flush()
        return user
