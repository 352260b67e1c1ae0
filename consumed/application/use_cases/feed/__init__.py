"""Activity feed use cases."""

from .consolidation import (
    DEFAULT_PREVIEW_LIMIT,
    DEFAULT_WINDOW_SECONDS,
    activity_icon,
    activity_label,
    consolidate,
    media_type_icon,
)
from .display_names import format_username, get_avatar_initial, get_display_name
from .events import MalformedPostError, event_from_post, events_from_posts
from .get_feed import FeedPage, get_feed
from .media_groups import group_by_media

__all__ = [
    "DEFAULT_PREVIEW_LIMIT",
    "DEFAULT_WINDOW_SECONDS",
    "FeedPage",
    "MalformedPostError",
    "activity_icon",
    "activity_label",
    "consolidate",
    "event_from_post",
    "events_from_posts",
    "format_username",
    "get_avatar_initial",
    "get_display_name",
    "get_feed",
    "group_by_media",
    "media_type_icon",
]
