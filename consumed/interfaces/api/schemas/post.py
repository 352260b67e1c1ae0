"""Pydantic schemas for social posts and likes."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PostCreate(BaseModel):
    post_type: str = Field(
        "add-to-list",
        min_length=1,
        max_length=40,
        description="add-to-list, rate-review, finished or another activity kind",
    )
    media_title: str = Field(..., min_length=1, max_length=255)
    media_type: str | None = Field(default=None, max_length=30)
    media_creator: str | None = Field(default=None, max_length=255)
    media_image: str | None = Field(default=None, max_length=500)
    media_external_id: str | None = Field(default=None, max_length=120)
    media_external_source: str | None = Field(default=None, max_length=40)
    rating: float | None = Field(default=None, ge=0, le=5)
    list_name: str | None = Field(default=None, max_length=80)
    list_id: str | None = Field(default=None, max_length=64)
    content: str | None = None


class PostRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
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
    created_at: datetime


class LikeRead(BaseModel):
    post_id: int
    likes: int
    liked: bool


__all__ = ["LikeRead", "PostCreate", "PostRead"]
