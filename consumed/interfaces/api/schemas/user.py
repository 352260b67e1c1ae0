"""Pydantic schemas for user registration and profiles."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class UserCreate(BaseModel):
    username: str = Field(..., min_length=3, max_length=50)
    email: EmailStr
    password: str = Field(..., min_length=8, max_length=128)
    display_name: str | None = Field(default=None, max_length=80)
    avatar: str | None = Field(default=None, max_length=500)


class UserRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    display_name: str
    email: EmailStr
    avatar: str | None = None
    is_active: bool
    created_at: datetime | None = None
    last_login: datetime | None = None


class FeedUserRead(BaseModel):
    """Public author information attached to feed cards."""

    id: str
    username: str
    display_name: str
    avatar: str | None = None
    initial: str


__all__ = ["FeedUserRead", "UserCreate", "UserRead"]
