"""Exception hierarchy raised by the service and repository layers."""

from __future__ import annotations


class TechNewsError(RuntimeError):
    """Base exception for domain failures surfaced to API callers."""


class NotFound(TechNewsError):
    """Raised when a referenced record does not exist."""


class PostNotFound(NotFound):
    """Raised when a post id does not resolve to a row."""

    def __init__(self, post_id: int) -> None:
        super().__init__(f"No post found with id {post_id}")
        self.post_id = post_id


class UserNotFound(NotFound):
    """Raised when a user id does not resolve to a row."""

    def __init__(self, user_id: int) -> None:
        super().__init__(f"No user found with id {user_id}")
        self.user_id = user_id


class DuplicateVote(TechNewsError):
    """Raised when a user tries to upvote the same post twice."""

    def __init__(self, user_id: int, post_id: int) -> None:
        super().__init__(f"User {user_id} has already voted on post {post_id}")
        self.user_id = user_id
        self.post_id = post_id


class ValidationFailure(TechNewsError):
    """Raised when a record fails field validation before persisting."""


class PersistenceFailure(TechNewsError):
    """Raised when the underlying store is unavailable or a query fails."""
