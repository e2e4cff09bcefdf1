# src/tech_news/models/post.py
"""SQLAlchemy model for link posts."""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from tech_news.db.session import Base
from tech_news.db.time import utcnow

if TYPE_CHECKING:
    from .comment import Comment
    from .user import User
    from .vote import Vote


class Post(Base):
    """A titled link shared by a user.

    The vote count is never stored here; it is derived from ``vote`` rows
    every time a post is read.
    """

    __tablename__ = "post"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    post_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    user_id: Mapped[int] = mapped_column(Integer, ForeignKey("user.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, default=utcnow, onupdate=utcnow
    )

    author: Mapped[User] = relationship("User", back_populates="posts")
    comments: Mapped[list[Comment]] = relationship(
        "Comment",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Comment.id",
    )
    votes: Mapped[list[Vote]] = relationship(
        "Vote",
        back_populates="post",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
