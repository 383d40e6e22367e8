"""Wire schemas for the posts resource.

Responses are validated strictly: missing fields or wrongly typed values
are a serialization failure, extra keys are ignored.
"""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from posts_mcp.domain.models import Post


class PostSchema(BaseModel):
    """JSON representation of a post."""

    model_config = ConfigDict(strict=True, extra="ignore")

    id: int
    title: str
    body: str
    user_id: int = Field(alias="userId")

    def to_domain(self) -> Post:
        """Convert to domain entity."""
        return Post(id=self.id, title=self.title, body=self.body, user_id=self.user_id)


post_list_adapter: TypeAdapter[list[PostSchema]] = TypeAdapter(list[PostSchema])
