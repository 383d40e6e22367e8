"""Remote posts API."""
from __future__ import annotations

from posts_mcp.infrastructure.api.posts_api_client import PostsApiClient
from posts_mcp.infrastructure.api.schemas import PostSchema

__all__ = [
    "PostsApiClient",
    "PostSchema",
]
