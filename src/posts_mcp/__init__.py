"""Posts MCP Server.

An MCP server driving a posts screen backed by a remote REST resource.
"""
from __future__ import annotations

__version__ = "0.1.0"
__author__ = "Posts-MCP Team"

__all__ = ["__version__"]
