"""Pytest configuration and fixtures."""
from __future__ import annotations

import pytest

from posts_mcp.domain import Post
from posts_mcp.shared.config import Settings
from tests.fakes import API_URL, StubPostsRepository


@pytest.fixture
def test_settings() -> Settings:
    """Test settings pointing at a fake host."""
    return Settings(
        api_base_url=API_URL,
        http_timeout=5.0,
        log_level="DEBUG",
    )


@pytest.fixture
def sample_posts() -> list[Post]:
    """Two posts as returned by the server."""
    return [
        Post(id=1, title="First", body="Hello", user_id=10),
        Post(id=2, title="Second", body="World", user_id=20),
    ]


@pytest.fixture
def repository() -> StubPostsRepository:
    """Repository returning an empty list."""
    return StubPostsRepository()
