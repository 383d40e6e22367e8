"""Value Objects.

Immutable objects defined by their attributes.
"""
from __future__ import annotations

from posts_mcp.domain.value_objects.network_error import NetworkError

__all__ = [
    "NetworkError",
]
