"""Translation of service exceptions into HTTP errors."""

from __future__ import annotations

from fastapi import HTTPException, status

from tech_news.services.errors import (
    DuplicateVote,
    NotFound,
    PersistenceFailure,
    TechNewsError,
    ValidationFailure,
)

# Starlette renamed 422 after RFC 9110; older releases only carry the old name.
if hasattr(status, "HTTP_422_UNPROCESSABLE_CONTENT"):
    HTTP_422_UNPROCESSABLE = status.HTTP_422_UNPROCESSABLE_CONTENT
else:
    HTTP_422_UNPROCESSABLE = status.HTTP_422_UNPROCESSABLE_ENTITY

_STATUS_BY_ERROR: tuple[tuple[type[TechNewsError], int], ...] = (
    (NotFound, status.HTTP_404_NOT_FOUND),
    (DuplicateVote, status.HTTP_409_CONFLICT),
    (ValidationFailure, HTTP_422_UNPROCESSABLE),
    (PersistenceFailure, status.HTTP_500_INTERNAL_SERVER_ERROR),
)


def to_http_exception(exc: TechNewsError) -> HTTPException:
    """Map a domain failure onto the status code the caller should see.

    Storage failures are already logged by the service that raised them, so
    nothing is logged here.
    """
    for error_type, status_code in _STATUS_BY_ERROR:
        if isinstance(exc, error_type):
            break
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        return HTTPException(status_code=status_code, detail="Storage error, please retry")
    return HTTPException(status_code=status_code, detail=str(exc))
