"""Dependency Injection Container.

Manages service lifecycle and dependencies.
"""
from __future__ import annotations

from typing import TYPE_CHECKING

from posts_mcp.shared.config import Settings, get_settings

if TYPE_CHECKING:
    from posts_mcp.application.viewmodel import PostsViewModel
    from posts_mcp.infrastructure.api import PostsApiClient
    from posts_mcp.infrastructure.http import HttpxTransport
    from posts_mcp.infrastructure.repositories import PostsRepository


class Container:
    """Dependency Injection Container.

    Singleton container for managing service instances.
    """

    _instance: Container | None = None
    _initialized: bool = False

    def __new__(cls, settings: Settings | None = None) -> Container:
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, settings: Settings | None = None) -> None:
        """Initialize container (only once).

        Args:
            settings: Settings override, defaults to the cached settings
        """
        if self._initialized:
            return

        self._initialized = True
        self._settings = settings or get_settings()

        # Services will be lazily initialized
        self._transport: HttpxTransport | None = None
        self._api_client: PostsApiClient | None = None
        self._repository: PostsRepository | None = None
        self._view_model: PostsViewModel | None = None

    @classmethod
    def reset(cls) -> None:
        """Forget the singleton instance."""
        cls._instance = None
        cls._initialized = False

    @property
    def settings(self) -> Settings:
        return self._settings

    def get_transport(self) -> HttpxTransport:
        """Get shared HttpxTransport instance."""
        from posts_mcp.infrastructure.http import HttpxTransport

        if self._transport is None:
            self._transport = HttpxTransport(
                timeout=self._settings.http_timeout,
                user_agent=self._settings.http_user_agent,
            )
        return self._transport

    def get_api_client(self) -> PostsApiClient:
        """Get PostsApiClient instance."""
        from posts_mcp.infrastructure.api import PostsApiClient

        if self._api_client is None:
            self._api_client = PostsApiClient(
                self.get_transport(),
                base_url=self._settings.api_base_url,
            )
        return self._api_client

    def get_repository(self) -> PostsRepository:
        """Get PostsRepository instance."""
        from posts_mcp.infrastructure.repositories import PostsRepository

        if self._repository is None:
            self._repository = PostsRepository(self.get_api_client())
        return self._repository

    def get_view_model(self) -> PostsViewModel:
        """Get the view-model of the posts screen."""
        from posts_mcp.application.viewmodel import PostsViewModel

        if self._view_model is None:
            self._view_model = PostsViewModel(self.get_repository())
        return self._view_model

    async def aclose(self) -> None:
        """Release the transport, waiting for in-flight operations first."""
        if self._view_model is not None:
            await self._view_model.join()
        if self._transport is not None:
            await self._transport.aclose()
            self._transport = None
            self._api_client = None
            self._repository = None
            self._view_model = None
