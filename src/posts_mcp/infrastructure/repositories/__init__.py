"""Repository Implementations.

API-backed implementations of domain repository interfaces.
"""
from __future__ import annotations

from posts_mcp.infrastructure.repositories.posts_repository import PostsRepository

__all__ = [
    "PostsRepository",
]
