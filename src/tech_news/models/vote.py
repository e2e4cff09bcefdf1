# src/tech_news/models/vote.py
"""Model capturing upvotes on posts."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Index, Integer, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tech_news.db.session import Base
from tech_news.db.time import utcnow

if TYPE_CHECKING:
    from .post import Post
    from .user import User


class Vote(Base):
    """A single upvote by one user on one post.

    Votes are irrevocable facts; the post's vote count is the number of
    rows referencing it.
    """

    __tablename__ = "vote"
    __table_args__ = (
        # At most one vote per user per post.
        UniqueConstraint("user_id", "post_id", name="uq_vote_user_post"),
        Index("ix_vote_post_id", "post_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("user.id"), nullable=False)
    post_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("post.id", ondelete="CASCADE"),
        nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )

    user: Mapped[User] = relationship("User", back_populates="votes")
    post: Mapped[Post] = relationship("Post", back_populates="votes")
