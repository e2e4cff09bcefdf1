# tests/test_models.py
"""Unit tests for the ORM mappings.

These tests verify table names, the vote uniqueness constraint and the
foreign keys whose delete behaviour the rest of the system relies on.
"""

import pytest
from sqlalchemy import UniqueConstraint
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import attributes

from tech_news.models import Comment, Post, User, Vote


def test_table_names() -> None:
    """Model classes expose the expected snake_cased table names."""
    assert User.__tablename__ == "user"
    assert Post.__tablename__ == "post"
    assert Comment.__tablename__ == "comment"
    assert Vote.__tablename__ == "vote"


def test_vote_unique_per_user_and_post() -> None:
    """The vote table carries a unique constraint over (user_id, post_id)."""
    uniques = [c for c in Vote.__table__.constraints if isinstance(c, UniqueConstraint)]
    assert {tuple(col.name for col in c.columns) for c in uniques} == {("user_id", "post_id")}


def test_post_has_no_stored_vote_count() -> None:
    """The vote count is derived, never a column on post."""
    assert "vote_count" not in Post.__table__.c


def _ondelete(table, column: str) -> str | None:
    (fk,) = table.c[column].foreign_keys
    return fk.ondelete


def test_foreign_key_delete_rules() -> None:
    """Comments and votes cascade with their post; users are never cascaded."""
    assert _ondelete(Comment.__table__, "post_id") == "CASCADE"
    assert _ondelete(Vote.__table__, "post_id") == "CASCADE"
    assert _ondelete(Post.__table__, "user_id") is None
    assert _ondelete(Comment.__table__, "user_id") is None
    assert _ondelete(Vote.__table__, "user_id") is None


def test_relationships_are_instrumented_attributes() -> None:
    """Relationship attributes are mapped descriptors."""
    for attr in (
        User.posts,
        User.comments,
        User.votes,
        Post.author,
        Post.comments,
        Post.votes,
        Comment.author,
        Comment.post,
        Vote.user,
        Vote.post,
    ):
        assert isinstance(attr, attributes.InstrumentedAttribute)


def test_database_rejects_duplicate_vote_rows(db_session, test_user, test_post) -> None:
    """The constraint holds even when the service layer is bypassed."""
    db_session.add(Vote(user_id=test_user.id, post_id=test_post.id))
    db_session.commit()

    db_session.add(Vote(user_id=test_user.id, post_id=test_post.id))
    with pytest.raises(IntegrityError):
        db_session.commit()
    db_session.rollback()
