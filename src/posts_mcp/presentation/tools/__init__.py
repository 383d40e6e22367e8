"""MCP Tools registration."""
from __future__ import annotations

from posts_mcp.presentation.tools.posts_tools import (
    OperationInProgressError,
    handle_posts_tool,
    register_posts_tools,
    render_state,
)

__all__ = [
    "OperationInProgressError",
    "handle_posts_tool",
    "register_posts_tools",
    "render_state",
]
