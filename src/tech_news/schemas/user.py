"""User-related Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class UserResponse(BaseModel):
    """Public view of a user; the password hash is never exposed."""

    id: int
    username: str
    email: str

    model_config = ConfigDict(from_attributes=True)


class AuthorSummary(BaseModel):
    """Username shown next to a post or comment."""

    username: str

    model_config = ConfigDict(from_attributes=True)
