"""Domain Models.

Core domain entities of the posts screen.
"""
from __future__ import annotations

from posts_mcp.domain.models.post import Post

__all__ = [
    "Post",
]
