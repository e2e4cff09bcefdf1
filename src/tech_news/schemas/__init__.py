"""
Pydantic schemas for API request/response models.

These schemas define the structure of API data for serialization and validation.
"""

from .comment import CommentResponse
from .post import PostDetailResponse, PostResponse
from .user import AuthorSummary, UserResponse
from .vote import MyVoteResponse, VoteCreate

__all__ = [
    "AuthorSummary",
    "CommentResponse",
    "MyVoteResponse",
    "PostDetailResponse", "PostResponse",
    "UserResponse",
    "VoteCreate",
]
