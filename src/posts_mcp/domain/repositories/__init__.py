"""Repository Interfaces (Protocols).

Defines the contracts for data access without implementation details.
"""
from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from posts_mcp.domain.models import Post
from posts_mcp.domain.value_objects import NetworkError
from posts_mcp.shared.result import Result


@runtime_checkable
class IPostsApiClient(Protocol):
    """Remote posts resource. Never raises; every outcome is a Result."""

    async def fetch_all(self) -> Result[Sequence[Post], NetworkError]: ...
    async def create(self, post: Post) -> Result[Post, NetworkError]: ...


@runtime_checkable
class IPostsRepository(Protocol):
    """Repository interface for posts."""

    async def fetch_all(self) -> Result[Sequence[Post], NetworkError]: ...
    async def create(self, post: Post) -> Result[Post, NetworkError]: ...
