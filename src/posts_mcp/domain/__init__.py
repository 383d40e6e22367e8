"""Domain Layer.

Contains the post entity, error taxonomy and repository interfaces.
This layer has NO external dependencies (no httpx, no frameworks).
"""
from __future__ import annotations

from posts_mcp.domain.exceptions import (
    DomainError,
    InvalidDraftFieldError,
    ValidationError,
)
from posts_mcp.domain.models import Post
from posts_mcp.domain.repositories import IPostsApiClient, IPostsRepository
from posts_mcp.domain.value_objects import NetworkError

__all__ = [
    # Exceptions
    "DomainError",
    "ValidationError",
    "InvalidDraftFieldError",
    # Models
    "Post",
    # Value Objects
    "NetworkError",
    # Repositories
    "IPostsApiClient",
    "IPostsRepository",
]
