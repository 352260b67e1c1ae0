"""Domain entity for comments left on social posts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime


@dataclass
class Comment:
    """A comment, optionally replying to another comment on the same post."""

    id: int | None
    post_id: int
    user_id: int
    content: str
    parent_comment_id: int | None = None
    created_at: datetime | None = None
    username: str | None = None
    replies: list["Comment"] = field(default_factory=list)


__all__ = ["Comment"]
