"""Posts screen view-model."""
from __future__ import annotations

from posts_mcp.application.viewmodel.events import (
    ClearForm,
    CreatePost,
    LoadPosts,
    PostsEvent,
    UpdateBody,
    UpdateId,
    UpdateTitle,
    UpdateUserId,
)
from posts_mcp.application.viewmodel.posts_view_model import Operation, PostsViewModel
from posts_mcp.application.viewmodel.state import PostsState, parse_int, validate_draft

__all__ = [
    # Events
    "PostsEvent",
    "LoadPosts",
    "CreatePost",
    "UpdateId",
    "UpdateTitle",
    "UpdateBody",
    "UpdateUserId",
    "ClearForm",
    # State
    "PostsState",
    "parse_int",
    "validate_draft",
    # View-model
    "Operation",
    "PostsViewModel",
]
