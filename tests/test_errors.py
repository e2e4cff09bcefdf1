# tests/test_errors.py
"""Tests for mapping service failures onto HTTP responses."""

import pytest
from fastapi import status

from tech_news.api.errors import HTTP_422_UNPROCESSABLE, to_http_exception
from tech_news.services import (
    DuplicateVote,
    PersistenceFailure,
    PostNotFound,
    ValidationFailure,
)


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (PostNotFound(7), status.HTTP_404_NOT_FOUND),
        (DuplicateVote(1, 7), status.HTTP_409_CONFLICT),
        (ValidationFailure("Invalid post URL"), 422),
        (PersistenceFailure("Could not record vote"), status.HTTP_500_INTERNAL_SERVER_ERROR),
    ],
)
def test_status_codes(error, expected: int) -> None:
    """Each failure category has its own status code."""
    assert to_http_exception(error).status_code == expected


def test_unprocessable_constant_is_422() -> None:
    """The 422 constant resolves on both old and new Starlette releases."""
    assert HTTP_422_UNPROCESSABLE == 422


def test_storage_errors_hide_details() -> None:
    """500 responses carry a generic message instead of the driver error."""
    exc = to_http_exception(PersistenceFailure("database is locked"))
    assert exc.detail == "Storage error, please retry"
    assert to_http_exception(DuplicateVote(1, 7)).detail == "User 1 has already voted on post 7"
