"""API endpoint modules."""

from .posts import router as posts_router

__all__ = ["posts_router"]
