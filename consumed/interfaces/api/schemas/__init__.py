"""Pydantic schemas exposed by the HTTP interface."""

from .auth import Token
from .comment import CommentCreate, CommentRead
from .feed import (
    ActivityGroupRead,
    FeedRead,
    ListGroupRead,
    MediaActivityGroupRead,
    MediaItemRead,
    SlideRead,
)
from .notification import (
    NotificationMarkReadRequest,
    NotificationMarkReadResponse,
    NotificationRead,
)
from .post import LikeRead, PostCreate, PostRead
from .user import FeedUserRead, UserCreate, UserRead

__all__ = [
    "ActivityGroupRead",
    "CommentCreate",
    "CommentRead",
    "FeedRead",
    "FeedUserRead",
    "LikeRead",
    "ListGroupRead",
    "MediaActivityGroupRead",
    "MediaItemRead",
    "NotificationMarkReadRequest",
    "NotificationMarkReadResponse",
    "NotificationRead",
    "PostCreate",
    "PostRead",
    "SlideRead",
    "Token",
    "UserCreate",
    "UserRead",
]
