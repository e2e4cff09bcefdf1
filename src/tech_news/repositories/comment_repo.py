"""Data access helpers for comments."""
from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session, joinedload

from tech_news.models.comment import Comment
from tech_news.models.post import Post
from tech_news.services.errors import NotFound, PostNotFound, ValidationFailure

__all__ = ["CommentRepository"]


class CommentRepository:
    """Thin wrapper around database access for comments."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, *, comment_text: str, user_id: int, post_id: int) -> Comment:
        """Insert a comment on an existing post."""
        if not comment_text or not comment_text.strip():
            raise ValidationFailure("Comment text must not be empty")
        if self.session.get(Post, post_id) is None:
            raise PostNotFound(post_id)

        comment = Comment(comment_text=comment_text, user_id=user_id, post_id=post_id)
        self.session.add(comment)
        self.session.flush()
        return comment

    def list_for_post(self, post_id: int) -> list[Comment]:
        """Return a post's comments oldest first."""
        stmt = (
            select(Comment)
            .options(joinedload(Comment.author))
            .where(Comment.post_id == post_id)
            .order_by(Comment.created_at, Comment.id)
        )
        return list(self.session.execute(stmt).scalars())

    def delete(self, comment_id: int) -> None:
        """Delete a single comment."""
        comment = self.session.get(Comment, comment_id)
        if comment is None:
            raise NotFound(f"No comment found with id {comment_id}")
        self.session.delete(comment)
        self.session.flush()
