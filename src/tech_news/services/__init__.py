"""Business logic services for the Tech News application."""

from .errors import (
    DuplicateVote,
    NotFound,
    PersistenceFailure,
    PostNotFound,
    TechNewsError,
    UserNotFound,
    ValidationFailure,
)
from .vote_ledger import VoteLedger

__all__ = [
    "DuplicateVote",
    "NotFound",
    "PersistenceFailure",
    "PostNotFound",
    "TechNewsError",
    "UserNotFound",
    "ValidationFailure",
    "VoteLedger",
]
