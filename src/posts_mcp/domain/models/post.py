"""Post Domain Entity.

A post record as exposed by the remote posts resource.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Post:
    """Immutable post record.

    Identity is `id`. Posts are either typed in through the draft form
    or returned by the server.

    Attributes:
        id: Post identifier
        title: Post title
        body: Post text
        user_id: Author identifier (``userId`` on the wire)

    Example:
        >>> Post(id=1, title="T", body="B", user_id=2).to_dict()
        {'id': 1, 'title': 'T', 'body': 'B', 'userId': 2}
    """

    id: int
    title: str
    body: str
    user_id: int

    def to_dict(self) -> dict[str, Any]:
        """Return the wire mapping of this post."""
        return {
            "id": self.id,
            "title": self.title,
            "body": self.body,
            "userId": self.user_id,
        }
