"""Data access helpers for working with posts."""
from __future__ import annotations

from urllib.parse import urlparse

from sqlalchemy import func, select
from sqlalchemy.orm import Session, joinedload, selectinload
from sqlalchemy.sql.elements import Label

from tech_news.models.comment import Comment
from tech_news.models.post import Post
from tech_news.models.vote import Vote
from tech_news.services.errors import PostNotFound, ValidationFailure

__all__ = ["PostRepository", "is_valid_url", "vote_count_column"]

_ALLOWED_SCHEMES = frozenset({"http", "https"})


def is_valid_url(value: str) -> bool:
    """Return True for absolute http(s) URLs with a host."""
    parsed = urlparse(value.strip())
    return parsed.scheme in _ALLOWED_SCHEMES and bool(parsed.hostname) and " " not in value.strip()


def vote_count_column() -> Label[int]:
    """Correlated ``COUNT(*)`` of votes for the outer post row."""
    return (
        select(func.count(Vote.id))
        .where(Vote.post_id == Post.id)
        .correlate(Post)
        .scalar_subquery()
        .label("vote_count")
    )


class PostRepository:
    """Thin wrapper around database access for post entities."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get_by_id(self, post_id: int) -> Post | None:
        """Return a post by identifier."""
        return self.session.get(Post, post_id)

    def exists(self, post_id: int) -> bool:
        """Return True when a post row with this id exists."""
        stmt = select(Post.id).where(Post.id == post_id)
        return self.session.execute(stmt).first() is not None

    def get_with_vote_count(
        self,
        post_id: int,
        *,
        include_comments: bool = True,
    ) -> tuple[Post, int] | None:
        """Return a post with its author, optional comments and derived count."""
        stmt = self._with_count(include_comments=include_comments).where(Post.id == post_id)
        row = self.session.execute(stmt).first()
        if row is None:
            return None
        return row[0], int(row[1])

    def list_with_vote_counts(self, *, include_comments: bool = True) -> list[tuple[Post, int]]:
        """Return every post newest first, each with its derived count."""
        stmt = self._with_count(include_comments=include_comments).order_by(
            Post.created_at.desc(),
            Post.id.desc(),
        )
        return [(row[0], int(row[1])) for row in self.session.execute(stmt).all()]

    def create(self, *, title: str, post_url: str, user_id: int) -> Post:
        """Insert a new post and return the persisted ORM instance.

        Args:
            title: Non-empty headline.
            post_url: Absolute http(s) link the post points at.
            user_id: Identifier of the authoring user.

        Raises:
            ValidationFailure: If the title is blank or the URL is malformed.
        """
        title = title.strip()
        if not title:
            raise ValidationFailure("Post title must not be empty")
        if not is_valid_url(post_url):
            raise ValidationFailure(f"Invalid post URL: {post_url!r}")

        post = Post(title=title, post_url=post_url.strip(), user_id=user_id)
        self.session.add(post)
        self.session.flush()
        return post

    def update_title(self, post_id: int, title: str) -> Post:
        """Change a post's title."""
        post = self.get_by_id(post_id)
        if post is None:
            raise PostNotFound(post_id)
        title = title.strip()
        if not title:
            raise ValidationFailure("Post title must not be empty")
        post.title = title
        self.session.flush()
        return post

    def delete(self, post_id: int) -> None:
        """Delete a post; its comments and votes go with it."""
        post = self.get_by_id(post_id)
        if post is None:
            raise PostNotFound(post_id)
        self.session.delete(post)
        self.session.flush()

    def _with_count(self, *, include_comments: bool):  # type: ignore[no-untyped-def]
        options = [joinedload(Post.author)]
        if include_comments:
            options.append(selectinload(Post.comments).joinedload(Comment.author))
        return (
            select(Post, vote_count_column())
            .options(*options)
            .execution_options(populate_existing=True)
        )
