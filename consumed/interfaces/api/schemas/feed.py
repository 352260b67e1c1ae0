"""Pydantic schemas for the consolidated activity feed."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field

from .user import FeedUserRead


class MediaItemRead(BaseModel):
    id: str
    title: str
    creator: str = ""
    media_type: str = ""
    media_icon: str = Field(..., description="Emoji shown next to the media type")
    image_url: str = ""
    external_id: str = ""
    external_source: str = ""
    rating: float | None = None


class ListGroupRead(BaseModel):
    list_name: str | None = None
    list_id: str | None = None
    items: list[MediaItemRead] = Field(default_factory=list)


class SlideRead(BaseModel):
    type: str
    title: str
    items: list[MediaItemRead] = Field(default_factory=list)
    rating: float | None = None
    list_name: str | None = None
    list_id: str | None = None


class ActivityGroupRead(BaseModel):
    id: str
    kind: str = Field(..., description="list_adds, ratings, finished or shared")
    action_type: str
    user: FeedUserRead
    timestamp: datetime
    date_label: str
    header_text: str
    summary_text: str
    label: str
    icon: str
    items: list[MediaItemRead] = Field(default_factory=list)
    preview_items: list[MediaItemRead] = Field(default_factory=list)
    remaining_count: int = 0
    total_items: int
    total_lists: int
    list_names: list[str] = Field(default_factory=list)
    lists: list[ListGroupRead] = Field(default_factory=list)
    slides: list[SlideRead] = Field(default_factory=list)
    likes: int = 0
    comments: int = 0
    liked_by_current_user: bool = False
    is_consolidated: bool = False
    original_post_ids: list[str] = Field(default_factory=list)


class MediaActivityGroupRead(BaseModel):
    media: MediaItemRead
    list_type: str
    users: list[FeedUserRead] = Field(default_factory=list)
    displayed_users: list[FeedUserRead] = Field(default_factory=list)
    remaining_count: int = 0
    show_bet: bool = False
    post_ids: list[str] = Field(default_factory=list)
    timestamp: datetime | None = None


class FeedRead(BaseModel):
    groups: list[ActivityGroupRead] = Field(default_factory=list)
    media_groups: list[MediaActivityGroupRead] = Field(default_factory=list)
    generated_at: datetime | None = None


__all__ = [
    "ActivityGroupRead",
    "FeedRead",
    "ListGroupRead",
    "MediaActivityGroupRead",
    "MediaItemRead",
    "SlideRead",
]
