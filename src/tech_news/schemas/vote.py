"""Vote-related Pydantic schemas."""

from pydantic import BaseModel, Field


class VoteCreate(BaseModel):
    """Schema for an upvote request; the voter comes from the session."""

    post_id: int = Field(..., ge=1, description="Post being upvoted")


class MyVoteResponse(BaseModel):
    """Whether the current user has already upvoted a post."""

    post_id: int
    voted: bool
