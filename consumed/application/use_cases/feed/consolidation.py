"""Merge raw user actions into activity cards for the feed.

Consecutive actions of the same kind by the same user collapse into a single
:class:`ActivityGroup` as long as they happen within ``window_seconds`` of the
group's newest action. The function is pure: it performs no I/O and keeps no
state between calls.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime

from consumed.domain.entities import (
    ActionType,
    ActivityGroup,
    Engagement,
    ListAddEvent,
    ListGroup,
    RawEvent,
    Slide,
)
from consumed.utils import parse_timestamp

logger = logging.getLogger(__name__)

DEFAULT_WINDOW_SECONDS = 24 * 60 * 60
DEFAULT_PREVIEW_LIMIT = 3

_NO_ENGAGEMENT = Engagement()


@dataclass(frozen=True)
class _TimedEvent:
    event: RawEvent
    timestamp: datetime


def consolidate(
    events: Sequence[RawEvent],
    window_seconds: float = DEFAULT_WINDOW_SECONDS,
    *,
    engagement: Mapping[str, Engagement] | None = None,
    preview_limit: int = DEFAULT_PREVIEW_LIMIT,
) -> list[ActivityGroup]:
    """Return activity groups for ``events``, newest group first.

    Events with an unusable timestamp or without a user are skipped and
    logged. Group engagement is read from ``engagement`` using the first
    source post of the group.
    """

    timed = _normalize(events)
    if not timed:
        return []

    # Stable: equal keys keep the caller's relative order.
    timed.sort(key=lambda item: item.timestamp, reverse=True)
    timed.sort(key=lambda item: (str(item.event.user_id), item.event.action_type.value))

    buckets: list[list[_TimedEvent]] = []
    for item in timed:
        current = buckets[-1] if buckets else None
        if current is None or not _belongs_to(current, item, window_seconds):
            buckets.append([item])
        else:
            current.append(item)

    engagement = engagement or {}
    groups = [_build_group(bucket, engagement, preview_limit) for bucket in buckets]
    groups.sort(key=lambda group: group.timestamp, reverse=True)
    return groups


def _normalize(events: Sequence[RawEvent]) -> list[_TimedEvent]:
    timed: list[_TimedEvent] = []
    for event in events:
        if event.user_id is None or str(event.user_id) == "":
            logger.warning("Skipping activity event %s without a user", event.id)
            continue
        try:
            timestamp = parse_timestamp(event.timestamp)
        except ValueError:
            logger.warning(
                "Skipping activity event %s with malformed timestamp %r",
                event.id,
                event.timestamp,
            )
            continue
        timed.append(_TimedEvent(event=event, timestamp=timestamp))
    return timed


def _belongs_to(bucket: list[_TimedEvent], item: _TimedEvent, window_seconds: float) -> bool:
    head = bucket[0]
    if str(head.event.user_id) != str(item.event.user_id):
        return False
    if head.event.action_type is not item.event.action_type:
        return False
    gap = (head.timestamp - item.timestamp).total_seconds()
    return gap <= window_seconds


def _build_group(
    bucket: list[_TimedEvent],
    engagement: Mapping[str, Engagement],
    preview_limit: int,
) -> ActivityGroup:
    head = bucket[0].event
    post_ids = [str(item.event.id) for item in bucket]
    counters = engagement.get(post_ids[0], _NO_ENGAGEMENT)

    group = ActivityGroup(
        id=f"{head.action_type.value}-{post_ids[0]}",
        user_id=str(head.user_id),
        action_type=head.action_type,
        timestamp=bucket[0].timestamp,
        items=[item.event.media_item for item in bucket],
        original_post_ids=post_ids,
        likes=counters.likes,
        comments=counters.comments,
        liked_by_current_user=counters.liked_by_current_user,
        preview_limit=preview_limit,
    )
    events = [item.event for item in bucket]
    if isinstance(head, ListAddEvent):
        group.lists = _partition_lists(events)
    group.slides = build_slides(group.action_type, events, group.lists)
    group.header_text = header_text(group)
    group.summary_text = summary_text(group)
    return group


def _partition_lists(events: list[RawEvent]) -> list[ListGroup]:
    lists: dict[str | None, ListGroup] = {}
    for event in events:
        name = event.list_name if isinstance(event, ListAddEvent) else None
        list_group = lists.get(name)
        if list_group is None:
            list_id = event.list_id if isinstance(event, ListAddEvent) else None
            list_group = lists[name] = ListGroup(list_name=name, list_id=list_id)
        list_group.items.append(event.media_item)
    return list(lists.values())


def build_slides(
    action_type: ActionType,
    events: list[RawEvent],
    lists: list[ListGroup],
) -> list[Slide]:
    """Split a group's items into carousel slides."""

    if action_type is ActionType.LIST_ADD:
        return [
            Slide(
                type="list_add",
                items=list(list_group.items),
                list_name=list_group.list_name,
                list_id=list_group.list_id,
            )
            for list_group in lists
        ]

    if action_type is ActionType.RATING:
        by_rating: dict[float | None, Slide] = {}
        for event in events:
            rating = event.media_item.rating
            slide = by_rating.get(rating)
            if slide is None:
                slide = by_rating[rating] = Slide(type="rating", rating=rating)
            slide.items.append(event.media_item)
        return list(by_rating.values())

    if action_type is ActionType.FINISHED:
        return [Slide(type="finished", items=[event.media_item for event in events])]

    return [Slide(type="activity", items=[event.media_item for event in events])]


def header_text(group: ActivityGroup) -> str:
    """Short action phrase shown next to the user's name."""

    if group.action_type is ActionType.LIST_ADD:
        first_list = group.list_names[0] if group.list_names else None
        return f"added to → {first_list}" if first_list else "added to a list"
    if group.action_type is ActionType.RATING:
        return _single_or_count("rated", group)
    if group.action_type is ActionType.FINISHED:
        return _single_or_count("finished", group)
    return "shared activity"


def summary_text(group: ActivityGroup) -> str:
    """Longer description of everything the card contains."""

    if group.action_type is ActionType.LIST_ADD:
        noun = _pluralize("item", group.total_items)
        if group.total_lists > 1:
            return f"added {group.total_items} {noun} across {group.total_lists} lists"
        if group.list_names:
            return f"added {group.total_items} {noun} to {group.list_names[0]}"
        return f"added {group.total_items} {noun}"
    if group.action_type is ActionType.RATING:
        return _single_or_count("rated", group)
    if group.action_type is ActionType.FINISHED:
        return _single_or_count("finished", group)
    return "shared activity"


_ACTIVITY_ICONS: dict[ActionType, str] = {
    ActionType.RATING: "star",
    ActionType.FINISHED: "check-circle",
    ActionType.LIST_ADD: "plus",
    ActionType.SHARED: "layers",
}

_ACTIVITY_LABELS: dict[ActionType, str] = {
    ActionType.LIST_ADD: "Added to Lists",
    ActionType.RATING: "Ratings",
    ActionType.FINISHED: "Finished",
    ActionType.SHARED: "Activity",
}

_MEDIA_TYPE_ICONS: dict[str, str] = {
    "movie": "🎬",
    "tv": "📺",
    "book": "📚",
    "music": "🎵",
    "podcast": "🎧",
    "game": "🎮",
}


def activity_icon(action_type: ActionType) -> str:
    return _ACTIVITY_ICONS[action_type]


def activity_label(action_type: ActionType) -> str:
    return _ACTIVITY_LABELS[action_type]


def media_type_icon(media_type: str | None) -> str:
    return _MEDIA_TYPE_ICONS.get((media_type or "").lower(), "📱")


def _single_or_count(verb: str, group: ActivityGroup) -> str:
    if group.total_items == 1:
        return f"{verb} {group.items[0].title}"
    return f"{verb} {group.total_items} items"


def _pluralize(noun: str, count: int) -> str:
    return noun if count == 1 else f"{noun}s"


__all__ = [
    "DEFAULT_PREVIEW_LIMIT",
    "DEFAULT_WINDOW_SECONDS",
    "activity_icon",
    "activity_label",
    "build_slides",
    "consolidate",
    "header_text",
    "media_type_icon",
    "summary_text",
]
