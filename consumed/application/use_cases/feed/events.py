"""Translate stored social posts into raw activity events."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from consumed.domain.entities import (
    FinishedEvent,
    ListAddEvent,
    MediaItem,
    RatingEvent,
    RawEvent,
    SharedActivityEvent,
    SocialPost,
)

logger = logging.getLogger(__name__)

LIST_ADD_POST_TYPES = frozenset({"add-to-list", "list_add", "rewatch"})
RATING_POST_TYPES = frozenset({"rate-review", "rating", "rate"})
FINISHED_POST_TYPES = frozenset({"finished", "complete", "completed"})


class MalformedPostError(ValueError):
    """Raised when a post lacks the fields needed to build an event."""


def event_from_post(post: SocialPost) -> RawEvent:
    """Return the activity event described by ``post``."""

    if post.id is None:
        raise MalformedPostError("Post has no identifier")
    if post.user_id is None:
        raise MalformedPostError(f"Post {post.id} has no author")
    if post.created_at is None:
        raise MalformedPostError(f"Post {post.id} has no creation time")
    title = (post.media_title or "").strip()
    if not title:
        raise MalformedPostError(f"Post {post.id} has no media attached")

    item = MediaItem(
        id=f"embedded_{post.id}",
        title=title,
        media_type=post.media_type or "",
        creator=post.media_creator or "",
        external_id=post.media_external_id or "",
        external_source=post.media_external_source or "",
        image_url=post.media_image or "",
        rating=post.rating,
    )
    common = {
        "id": str(post.id),
        "user_id": str(post.user_id),
        "media_item": item,
        "timestamp": post.created_at,
    }

    post_type = (post.post_type or "").strip().lower()
    if post_type in LIST_ADD_POST_TYPES:
        return ListAddEvent(
            **common,
            list_name=post.list_name,
            list_id=post.list_id,
        )
    if post_type in RATING_POST_TYPES:
        return RatingEvent(**common)
    if post_type in FINISHED_POST_TYPES:
        return FinishedEvent(**common)
    return SharedActivityEvent(**common, raw_action_type=post_type)


def events_from_posts(posts: Iterable[SocialPost]) -> list[RawEvent]:
    """Build events for ``posts``, skipping and logging the malformed ones."""

    events: list[RawEvent] = []
    for post in posts:
        try:
            events.append(event_from_post(post))
        except MalformedPostError as exc:
            logger.warning("Skipping post in activity feed: %s", exc)
    return events


__all__ = [
    "MalformedPostError",
    "event_from_post",
    "events_from_posts",
]
