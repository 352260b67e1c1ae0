"""Group list additions of the same title made by different users."""

from __future__ import annotations

from collections.abc import Sequence

from consumed.domain.entities import ListAddEvent, MediaActivityGroup, RawEvent
from consumed.utils import parse_timestamp


def group_by_media(
    events: Sequence[RawEvent], *, preview_limit: int = 3
) -> list[MediaActivityGroup]:
    """Return titles that two or more distinct users added to a list.

    Users appear once per group, in the order their first addition was seen.
    Groups come back in order of their first event in ``events``.
    """

    groups: dict[tuple[str, str], MediaActivityGroup] = {}
    for event in events:
        if not isinstance(event, ListAddEvent):
            continue
        key = event.media_item.media_key
        group = groups.get(key)
        if group is None:
            group = groups[key] = MediaActivityGroup(
                media=event.media_item,
                list_type=event.list_name or "",
                preview_limit=preview_limit,
            )
        user_id = str(event.user_id)
        if user_id in group.user_ids:
            continue
        group.user_ids.append(user_id)
        group.post_ids.append(str(event.id))
        try:
            timestamp = parse_timestamp(event.timestamp)
        except ValueError:
            continue
        if group.timestamp is None or timestamp > group.timestamp:
            group.timestamp = timestamp

    return [group for group in groups.values() if len(group.user_ids) >= 2]


__all__ = ["group_by_media"]
