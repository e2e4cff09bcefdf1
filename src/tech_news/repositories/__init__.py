"""Persistence collaborators wrapping SQLAlchemy sessions."""

from .comment_repo import CommentRepository
from .post_repo import PostRepository
from .user_repo import UserRepository
from .vote_repo import VoteRepository

__all__ = [
    "CommentRepository",
    "PostRepository",
    "UserRepository",
    "VoteRepository",
]
