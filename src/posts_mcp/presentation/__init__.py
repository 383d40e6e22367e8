"""Presentation Layer.

MCP server exposing the posts screen.
"""
from __future__ import annotations

from posts_mcp.presentation.server import main

__all__ = ["main"]
