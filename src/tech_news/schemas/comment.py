"""Comment-related Pydantic schemas."""

from datetime import datetime

from pydantic import BaseModel

from .user import AuthorSummary


class CommentResponse(BaseModel):
    """Schema for a comment embedded in a post read."""

    id: int
    comment_text: str
    post_id: int
    user_id: int
    created_at: datetime
    user: AuthorSummary
