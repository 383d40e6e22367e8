"""Posts Repository Implementation.

Delegates straight to the API client; no caching, no retries.
"""
from __future__ import annotations

from typing import Sequence

from posts_mcp.domain import IPostsApiClient, NetworkError, Post
from posts_mcp.shared.result import Result


class PostsRepository:
    """API-backed implementation of IPostsRepository."""

    def __init__(self, api_client: IPostsApiClient) -> None:
        """Initialize repository with API client.

        Args:
            api_client: Client for the remote posts resource
        """
        self._api_client = api_client

    async def fetch_all(self) -> Result[Sequence[Post], NetworkError]:
        return await self._api_client.fetch_all()

    async def create(self, post: Post) -> Result[Post, NetworkError]:
        return await self._api_client.create(post)
