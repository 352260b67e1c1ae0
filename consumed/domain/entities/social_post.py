"""Domain entity describing a post in the social feed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass
class SocialPost:
    """A logged user action with the media it refers to embedded."""

    id: int | None
    user_id: int
    post_type: str
    content: str | None = None
    media_title: str | None = None
    media_type: str | None = None
    media_creator: str | None = None
    media_image: str | None = None
    media_external_id: str | None = None
    media_external_source: str | None = None
    rating: float | None = None
    list_name: str | None = None
    list_id: str | None = None
    likes_count: int = 0
    comments_count: int = 0
    created_at: datetime | None = None


__all__ = ["SocialPost"]
