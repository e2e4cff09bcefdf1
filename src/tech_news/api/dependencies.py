"""Shared API dependencies for session resolution and services."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from tech_news.core.security import decode_access_token
from tech_news.db.session import get_db
from tech_news.models import User
from tech_news.services.vote_ledger import VoteLedger

# HTTP Bearer scheme carrying the caller's session token
bearer_scheme = HTTPBearer()

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials, Depends(bearer_scheme)],
    db: SessionDep,
) -> User:
    """Get the current authenticated user from the session token.

    Args:
        credentials: HTTP Bearer token credentials
        db: Database session

    Returns:
        User object for the authenticated user

    Raises:
        HTTPException: If the token is invalid or the user no longer exists
    """
    user_id = decode_access_token(credentials.credentials)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Could not validate credentials",
        )

    user = db.get(User, user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
        )
    return user


def get_vote_ledger(db: SessionDep) -> VoteLedger:
    """Return a vote ledger bound to the request's session."""
    return VoteLedger(db)


# Type aliases for current user and ledger dependencies
CurrentUserDep = Annotated[User, Depends(get_current_user)]
VoteLedgerDep = Annotated[VoteLedger, Depends(get_vote_ledger)]
