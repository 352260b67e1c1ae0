"""Domain entity representing a user."""

from dataclasses import dataclass
from datetime import datetime


@dataclass
class User:
    """Core attributes describing an application user."""

    id: int | None
    username: str
    display_name: str
    email: str
    password: str
    avatar: str | None
    is_active: bool
    created_at: datetime | None
    last_login: datetime | None = None


__all__ = ["User"]
