# src/tech_news/models/__init__.py
"""SQLAlchemy models for the Tech News application."""

from .comment import Comment
from .post import Post
from .user import User
from .vote import Vote

__all__ = [
    "Comment",
    "Post",
    "User",
    "Vote",
]
