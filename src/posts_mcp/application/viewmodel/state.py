"""Posts screen state.

A single immutable snapshot, replaced wholesale on every transition.
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from posts_mcp.domain import InvalidDraftFieldError, NetworkError, Post
from posts_mcp.shared.result import Failure, Result, Success

# Optional sign followed by ASCII digits
_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


@dataclass(frozen=True, slots=True)
class PostsState:
    """Snapshot of the posts screen.

    Draft fields are strings because they hold raw, possibly invalid,
    user input.

    Attributes:
        posts: Posts in display order
        id: Draft id
        title: Draft title
        body: Draft body
        user_id: Draft author id
        is_loading: True while an operation is in flight
        error: Failure of the last operation, cleared when a new one starts
    """

    posts: tuple[Post, ...] = ()
    id: str = ""
    title: str = ""
    body: str = ""
    user_id: str = ""
    is_loading: bool = False
    error: NetworkError | None = None


def parse_int(text: str) -> int | None:
    """Parse a draft integer, returning None if it is not a 32-bit integer."""
    if not _INT_PATTERN.fullmatch(text):
        return None
    value = int(text)
    if value < _INT_MIN or value > _INT_MAX:
        return None
    return value


def validate_draft(state: PostsState) -> Result[Post, InvalidDraftFieldError]:
    """Build a Post from the draft fields of a state.

    Args:
        state: Current screen state

    Returns:
        Success(Post) when every draft field is usable,
        Failure(InvalidDraftFieldError) naming the first bad field.
    """
    post_id = parse_int(state.id)
    if post_id is None:
        return Failure(InvalidDraftFieldError("id", state.id, "not an integer"))

    user_id = parse_int(state.user_id)
    if user_id is None:
        return Failure(InvalidDraftFieldError("user_id", state.user_id, "not an integer"))

    if not state.title.strip():
        return Failure(InvalidDraftFieldError("title", state.title, "must not be blank"))
    if not state.body.strip():
        return Failure(InvalidDraftFieldError("body", state.body, "must not be blank"))

    return Success(Post(id=post_id, title=state.title, body=state.body, user_id=user_id))
