"""Domain entities exposed by the application."""

from .activity_event import (
    ActionType,
    FinishedEvent,
    ListAddEvent,
    RatingEvent,
    RawEvent,
    SharedActivityEvent,
)
from .activity_group import (
    ActivityGroup,
    Engagement,
    ListGroup,
    MediaActivityGroup,
    Slide,
)
from .comment import Comment
from .media_item import MediaItem
from .notification import Notification
from .social_post import SocialPost
from .user import User

__all__ = [
    "ActionType",
    "ActivityGroup",
    "Comment",
    "Engagement",
    "FinishedEvent",
    "ListAddEvent",
    "ListGroup",
    "MediaActivityGroup",
    "MediaItem",
    "Notification",
    "RatingEvent",
    "RawEvent",
    "SharedActivityEvent",
    "Slide",
    "SocialPost",
    "User",
]
