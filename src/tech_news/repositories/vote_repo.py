"""Data access helpers for vote rows."""
from __future__ import annotations

from sqlalchemy import func, select
from sqlalchemy.orm import Session

from tech_news.models.vote import Vote

__all__ = ["VoteRepository"]


class VoteRepository:
    """Thin wrapper around database access for votes."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def exists(self, user_id: int, post_id: int) -> bool:
        """Return True when the user already voted on the post."""
        stmt = select(Vote.id).where(Vote.user_id == user_id, Vote.post_id == post_id)
        return self.session.execute(stmt).first() is not None

    def add(self, user_id: int, post_id: int) -> Vote:
        """Insert a vote row and flush so constraint violations surface here."""
        vote = Vote(user_id=user_id, post_id=post_id)
        self.session.add(vote)
        self.session.flush()
        return vote

    def count_for_post(self, post_id: int) -> int:
        """Return ``COUNT(*) FROM vote WHERE post_id = :post_id``."""
        stmt = select(func.count()).select_from(Vote).where(Vote.post_id == post_id)
        return int(self.session.execute(stmt).scalar_one())
