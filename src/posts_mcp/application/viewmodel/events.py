"""Posts screen events.

Events are the only way to change the screen state.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class LoadPosts:
    """Fetch the full list of posts."""


@dataclass(frozen=True, slots=True)
class CreatePost:
    """Submit the draft form."""


@dataclass(frozen=True, slots=True)
class UpdateId:
    """Replace the draft id."""

    text: str


@dataclass(frozen=True, slots=True)
class UpdateTitle:
    """Replace the draft title."""

    text: str


@dataclass(frozen=True, slots=True)
class UpdateBody:
    """Replace the draft body."""

    text: str


@dataclass(frozen=True, slots=True)
class UpdateUserId:
    """Replace the draft author id."""

    text: str


@dataclass(frozen=True, slots=True)
class ClearForm:
    """Empty every draft field."""


PostsEvent = Union[
    LoadPosts,
    CreatePost,
    UpdateId,
    UpdateTitle,
    UpdateBody,
    UpdateUserId,
    ClearForm,
]
