"""Post-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel

from .comment import CommentResponse
from .user import AuthorSummary


class PostResponse(BaseModel):
    """Post information returned by the API with its derived vote count."""

    id: int
    title: str
    post_url: str
    user_id: int
    created_at: datetime
    vote_count: int
    user: AuthorSummary


class PostDetailResponse(PostResponse):
    """Post read including its comments."""

    comments: list[CommentResponse] = []
