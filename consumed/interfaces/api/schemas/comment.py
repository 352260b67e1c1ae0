"""Pydantic schemas for post comments."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class CommentCreate(BaseModel):
    content: str = Field(..., min_length=1, max_length=2000)
    parent_comment_id: int | None = None


class CommentRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    post_id: int
    user_id: int
    username: str | None = None
    content: str
    parent_comment_id: int | None = None
    created_at: datetime
    replies: list["CommentRead"] = Field(default_factory=list)


CommentRead.model_rebuild()


__all__ = ["CommentCreate", "CommentRead"]
