"""Vote ledger: one upvote per user per post and derived vote counts.

The ledger owns the only real invariant in the application. Every vote is
inserted under the ``uq_vote_user_post`` constraint, and every read of a post
recomputes ``vote_count`` from the ``vote`` table in the same statement, so
callers never see a cached or drifting total.
"""
from __future__ import annotations

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from tech_news.models.comment import Comment
from tech_news.models.post import Post
from tech_news.repositories.post_repo import PostRepository
from tech_news.repositories.vote_repo import VoteRepository
from tech_news.schemas.comment import CommentResponse
from tech_news.schemas.post import PostDetailResponse, PostResponse
from tech_news.schemas.user import AuthorSummary
from tech_news.services.errors import DuplicateVote, PersistenceFailure, PostNotFound

logger = logging.getLogger(__name__)

__all__ = ["VoteLedger", "to_comment_response", "to_post_detail", "to_post_response"]


def to_post_response(post: Post, vote_count: int) -> PostResponse:
    """Convert a Post ORM instance and its derived count to an API schema."""
    return PostResponse(
        id=post.id,
        title=post.title,
        post_url=post.post_url,
        user_id=post.user_id,
        created_at=post.created_at,
        vote_count=vote_count,
        user=AuthorSummary(username=post.author.username),
    )


def to_comment_response(comment: Comment) -> CommentResponse:
    """Convert a Comment ORM instance, with its author loaded, to an API schema."""
    return CommentResponse(
        id=comment.id,
        comment_text=comment.comment_text,
        post_id=comment.post_id,
        user_id=comment.user_id,
        created_at=comment.created_at,
        user=AuthorSummary(username=comment.author.username),
    )


def to_post_detail(post: Post, vote_count: int) -> PostDetailResponse:
    """Like :func:`to_post_response` but with the post's comments embedded."""
    base = to_post_response(post, vote_count)
    return PostDetailResponse(
        **base.model_dump(),
        comments=[to_comment_response(comment) for comment in post.comments],
    )


class VoteLedger:
    """Records upvotes and serves posts with authoritative vote counts."""

    def __init__(self, session: Session) -> None:
        """Bind the ledger to an explicitly supplied database session."""
        self.session = session
        self.posts = PostRepository(session)
        self.votes = VoteRepository(session)

    def cast_vote(self, user_id: int, post_id: int) -> PostResponse:
        """Record one upvote and return the post with its fresh count.

        The insert, the count and the post read run in a single transaction
        that is committed only once the response snapshot has been built.

        Args:
            user_id: Authenticated voter, resolved by the caller's session.
            post_id: Post being upvoted.

        Returns:
            The post with its author and the count including this vote.

        Raises:
            PostNotFound: If ``post_id`` does not resolve to a post.
            DuplicateVote: If the user already voted on this post.
            PersistenceFailure: On any other storage error. Nothing is retried.
        """
        try:
            if not self.posts.exists(post_id):
                raise PostNotFound(post_id)
            if self.votes.exists(user_id, post_id):
                raise DuplicateVote(user_id, post_id)

            self.votes.add(user_id, post_id)
            row = self.posts.get_with_vote_count(post_id, include_comments=False)
            if row is None:
                raise PostNotFound(post_id)
            response = to_post_response(*row)
            self.session.commit()
        except (PostNotFound, DuplicateVote) as exc:
            self.session.rollback()
            logger.warning("Rejected vote by user %s on post %s: %s", user_id, post_id, exc)
            raise
        except IntegrityError as exc:
            self.session.rollback()
            raise self._classify_integrity_error(user_id, post_id) from exc
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.error(
                "Storage error while recording vote by user %s on post %s",
                user_id,
                post_id,
                exc_info=True,
            )
            raise PersistenceFailure("Could not record vote") from exc

        logger.info(
            "User %s upvoted post %s (vote_count=%d)", user_id, post_id, response.vote_count
        )
        return response

    def get_post_with_vote_count(self, post_id: int) -> PostDetailResponse:
        """Return one post with author, comments and derived vote count."""
        try:
            row = self.posts.get_with_vote_count(post_id)
        except SQLAlchemyError as exc:
            logger.error("Storage error while reading post %s", post_id, exc_info=True)
            raise PersistenceFailure("Could not read post") from exc
        if row is None:
            raise PostNotFound(post_id)
        return to_post_detail(*row)

    def list_posts_with_vote_counts(self) -> list[PostDetailResponse]:
        """Return all posts newest first, each with a freshly computed count."""
        try:
            rows = self.posts.list_with_vote_counts()
        except SQLAlchemyError as exc:
            logger.error("Storage error while listing posts", exc_info=True)
            raise PersistenceFailure("Could not list posts") from exc
        return [to_post_detail(post, count) for post, count in rows]

    def has_voted(self, user_id: int, post_id: int) -> bool:
        """Return True when ``user_id`` has already upvoted ``post_id``."""
        try:
            return self.votes.exists(user_id, post_id)
        except SQLAlchemyError as exc:
            logger.error(
                "Storage error while reading vote by user %s on post %s",
                user_id,
                post_id,
                exc_info=True,
            )
            raise PersistenceFailure("Could not read vote") from exc

    def _classify_integrity_error(self, user_id: int, post_id: int) -> Exception:
        # A concurrent request may have won the race on the unique constraint.
        try:
            if self.votes.exists(user_id, post_id):
                logger.warning(
                    "Concurrent duplicate vote by user %s on post %s", user_id, post_id
                )
                return DuplicateVote(user_id, post_id)
            if not self.posts.exists(post_id):
                logger.warning("Post %s vanished while voting", post_id)
                return PostNotFound(post_id)
        except SQLAlchemyError:
            logger.error("Storage error while classifying vote failure", exc_info=True)
        logger.error("Integrity error recording vote by user %s on post %s", user_id, post_id)
        return PersistenceFailure("Could not record vote")
