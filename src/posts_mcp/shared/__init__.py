"""Shared module.

Cross-cutting concerns: configuration, logging, result pattern.
"""
from posts_mcp.shared.config import Settings, get_settings, settings
from posts_mcp.shared.result import Failure, Result, Success, err, ok

__all__ = [
    "Settings",
    "get_settings",
    "settings",
    "Success",
    "Failure",
    "Result",
    "ok",
    "err",
]
