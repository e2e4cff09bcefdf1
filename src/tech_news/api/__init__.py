"""HTTP API for the Tech News application."""

from .endpoints import posts_router

__all__ = ["posts_router"]
