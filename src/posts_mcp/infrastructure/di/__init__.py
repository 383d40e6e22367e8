"""Dependency injection."""
from __future__ import annotations

from posts_mcp.infrastructure.di.container import Container

__all__ = ["Container"]
