# src/tech_news/api/endpoints/posts.py
"""Post read and upvote endpoints for the Tech News API."""

from fastapi import APIRouter

from tech_news.api.dependencies import CurrentUserDep, VoteLedgerDep
from tech_news.api.errors import to_http_exception
from tech_news.schemas.post import PostDetailResponse, PostResponse
from tech_news.schemas.vote import MyVoteResponse, VoteCreate
from tech_news.services.errors import TechNewsError

router = APIRouter(prefix="/posts", tags=["posts"])


@router.get("", response_model=list[PostDetailResponse])
async def list_posts(ledger: VoteLedgerDep) -> list[PostDetailResponse]:
    """List every post newest first with comments and vote counts."""
    try:
        return ledger.list_posts_with_vote_counts()
    except TechNewsError as exc:
        raise to_http_exception(exc) from exc


# Declared before the /{post_id} routes so "upvote" is never taken for an id.
@router.put("/upvote", response_model=PostResponse)
async def upvote_post(
    vote_data: VoteCreate,
    current_user: CurrentUserDep,
    ledger: VoteLedgerDep,
) -> PostResponse:
    """Upvote a post as the session's user.

    Args:
        vote_data: Body carrying the post id
        current_user: Authenticated voter
        ledger: Vote ledger bound to the request session

    Returns:
        The upvoted post with its updated vote count

    Raises:
        HTTPException: 404 for an unknown post, 409 for a repeated vote,
                      500 when the store fails
    """
    try:
        return ledger.cast_vote(current_user.id, vote_data.post_id)
    except TechNewsError as exc:
        raise to_http_exception(exc) from exc


@router.get("/{post_id}", response_model=PostDetailResponse)
async def get_post(post_id: int, ledger: VoteLedgerDep) -> PostDetailResponse:
    """Get a specific post by ID with comments and vote count."""
    try:
        return ledger.get_post_with_vote_count(post_id)
    except TechNewsError as exc:
        raise to_http_exception(exc) from exc


@router.get("/{post_id}/my-vote", response_model=MyVoteResponse)
async def get_my_vote(
    post_id: int,
    current_user: CurrentUserDep,
    ledger: VoteLedgerDep,
) -> MyVoteResponse:
    """Report whether the current user has upvoted a post."""
    try:
        voted = ledger.has_voted(current_user.id, post_id)
    except TechNewsError as exc:
        raise to_http_exception(exc) from exc
    return MyVoteResponse(post_id=post_id, voted=voted)
