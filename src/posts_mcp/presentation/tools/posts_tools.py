"""Posts MCP Tools.

Tools driving the posts screen. Every tool dispatches events to the
view-model, waits for in-flight operations and answers with the state.
"""
from __future__ import annotations

import json
from typing import Any, Callable

from mcp.server import Server
from mcp.types import TextContent, Tool

from posts_mcp.application.viewmodel import (
    ClearForm,
    CreatePost,
    LoadPosts,
    Operation,
    PostsEvent,
    PostsState,
    PostsViewModel,
    UpdateBody,
    UpdateId,
    UpdateTitle,
    UpdateUserId,
)
from posts_mcp.shared.logging import get_logger

logger = get_logger(__name__)


class OperationInProgressError(Exception):
    """A tool call was refused because the same operation is running."""

    def __init__(self, operation: Operation) -> None:
        self.operation = operation
        super().__init__(f"{operation.value} already in progress")


# Draft argument name -> event carrying it
DRAFT_EVENTS: dict[str, Callable[[str], PostsEvent]] = {
    "id": UpdateId,
    "title": UpdateTitle,
    "body": UpdateBody,
    "user_id": UpdateUserId,
}

_DRAFT_PROPERTIES = {
    "id": {"type": "string", "description": "Draft post id (integer as text)"},
    "title": {"type": "string", "description": "Draft title"},
    "body": {"type": "string", "description": "Draft body"},
    "user_id": {"type": "string", "description": "Draft author id (integer as text)"},
}

POSTS_TOOLS = [
    Tool(
        name="posts_load",
        description="Load all posts from the remote resource.",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="posts_create",
        description=(
            "Create a post from the draft form. Draft fields given here are "
            "applied first. Invalid drafts are ignored."
        ),
        inputSchema={"type": "object", "properties": _DRAFT_PROPERTIES},
    ),
    Tool(
        name="posts_update_draft",
        description="Update one or more draft fields without submitting.",
        inputSchema={"type": "object", "properties": _DRAFT_PROPERTIES},
    ),
    Tool(
        name="posts_clear_form",
        description="Reset every draft field to empty.",
        inputSchema={"type": "object", "properties": {}},
    ),
    Tool(
        name="posts_get_state",
        description="Return the current posts screen state.",
        inputSchema={"type": "object", "properties": {}},
    ),
]


def render_state(state: PostsState) -> dict[str, Any]:
    """Serialize a state snapshot for display.

    Args:
        state: Snapshot to render

    Returns:
        JSON-compatible mapping
    """
    return {
        "posts": [post.to_dict() for post in state.posts],
        "draft": {
            "id": state.id,
            "title": state.title,
            "body": state.body,
            "user_id": state.user_id,
        },
        "is_loading": state.is_loading,
        "error": state.error.value if state.error else None,
        "error_message": f"Error: {state.error.value}" if state.error else None,
    }


def _draft_events(arguments: dict[str, Any]) -> list[PostsEvent]:
    return [
        DRAFT_EVENTS[key](str(arguments[key]))
        for key in DRAFT_EVENTS
        if arguments.get(key) is not None
    ]


async def handle_posts_tool(
    view_model: PostsViewModel,
    name: str,
    arguments: dict[str, Any],
) -> dict[str, Any] | None:
    """Run a posts tool against a view-model.

    Args:
        view_model: Screen view-model
        name: Tool name
        arguments: Tool arguments

    Returns:
        Rendered state, or None for an unknown tool

    Raises:
        OperationInProgressError: If posts_create is called while a create
            is still running. The draft is left untouched.
    """
    if name == "posts_load":
        events: list[PostsEvent] = [LoadPosts()]
    elif name == "posts_create":
        if Operation.CREATE in view_model.in_flight:
            raise OperationInProgressError(Operation.CREATE)
        events = [*_draft_events(arguments), CreatePost()]
    elif name == "posts_update_draft":
        events = _draft_events(arguments)
    elif name == "posts_clear_form":
        events = [ClearForm()]
    elif name == "posts_get_state":
        events = []
    else:
        return None

    for event in events:
        view_model.dispatch(event)
    await view_model.join()

    return render_state(view_model.state)


def register_posts_tools(server: Server, view_model: PostsViewModel) -> None:
    """Register posts MCP tools.

    Args:
        server: MCP Server instance
        view_model: View-model shared by every tool call
    """

    @server.list_tools()
    async def list_posts_tools() -> list[Tool]:
        """List available posts tools."""
        return POSTS_TOOLS

    @server.call_tool()
    async def call_posts_tool(name: str, arguments: dict[str, Any]) -> list[TextContent]:
        """Handle posts tool calls."""
        try:
            result = await handle_posts_tool(view_model, name, arguments or {})
            if result is None:
                return [TextContent(type="text", text=f"Unknown tool: {name}")]
            return [TextContent(type="text", text=json.dumps(result, indent=2))]
        except OperationInProgressError as e:
            logger.info("Tool refused", tool=name, reason=str(e))
            return [TextContent(type="text", text=f"Error: {str(e)}")]
        except Exception as e:
            logger.error("Tool error", tool=name, error=str(e))
            return [TextContent(type="text", text=f"Error: {str(e)}")]
