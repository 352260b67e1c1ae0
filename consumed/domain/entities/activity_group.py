"""Rendering-time aggregations built from raw activity events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from .activity_event import ActionType
from .media_item import MediaItem


@dataclass(frozen=True)
class Engagement:
    """Like and comment counters tracked for a single post."""

    likes: int = 0
    comments: int = 0
    liked_by_current_user: bool = False


@dataclass
class ListGroup:
    """Items of a ``list_add`` group that went into the same list."""

    list_name: str | None
    list_id: str | None = None
    items: list[MediaItem] = field(default_factory=list)


@dataclass
class Slide:
    """One carousel page of an activity group."""

    type: str
    items: list[MediaItem] = field(default_factory=list)
    rating: float | None = None
    list_name: str | None = None
    list_id: str | None = None

    @property
    def title(self) -> str:
        if self.type == "rating":
            if self.rating is None:
                return "Rated"
            plural = "" if self.rating == 1 else "s"
            return f"Rated {_format_number(self.rating)} star{plural}"
        if self.type == "finished":
            return "Finished"
        if self.type == "list_add":
            return f"Added to {self.list_name or 'list'}"
        return "Activity"


@dataclass
class ActivityGroup:
    """A user's same-kind actions merged into a single feed card.

    ``original_post_ids`` lists the source posts in item order; like, comment
    and delete actions on the card target ``original_post_ids[0]``.
    """

    id: str
    user_id: str
    action_type: ActionType
    timestamp: datetime
    items: list[MediaItem] = field(default_factory=list)
    lists: list[ListGroup] = field(default_factory=list)
    slides: list[Slide] = field(default_factory=list)
    original_post_ids: list[str] = field(default_factory=list)
    likes: int = 0
    comments: int = 0
    liked_by_current_user: bool = False
    preview_limit: int = 3
    header_text: str = ""
    summary_text: str = ""

    @property
    def kind(self) -> str:
        return _GROUP_KINDS[self.action_type]

    @property
    def total_items(self) -> int:
        return len(self.items)

    @property
    def list_names(self) -> list[str]:
        return [group.list_name for group in self.lists if group.list_name]

    @property
    def total_lists(self) -> int:
        return len(self.list_names)

    @property
    def preview_items(self) -> list[MediaItem]:
        return self.items[: self.preview_limit]

    @property
    def remaining_count(self) -> int:
        return max(0, self.total_items - self.preview_limit)

    @property
    def is_consolidated(self) -> bool:
        return self.total_items > 1 or self.total_lists > 1

    @property
    def representative_post_id(self) -> str | None:
        return self.original_post_ids[0] if self.original_post_ids else None


@dataclass
class MediaActivityGroup:
    """Several users adding the same title to their lists."""

    media: MediaItem
    list_type: str
    user_ids: list[str] = field(default_factory=list)
    post_ids: list[str] = field(default_factory=list)
    timestamp: datetime | None = None
    preview_limit: int = 3

    @property
    def displayed_user_ids(self) -> list[str]:
        return self.user_ids[: self.preview_limit]

    @property
    def remaining_count(self) -> int:
        return max(0, len(self.user_ids) - self.preview_limit)

    @property
    def show_bet(self) -> bool:
        list_type = (self.list_type or "").lower()
        return "want" in list_type or "currently" in list_type


_GROUP_KINDS: dict[ActionType, str] = {
    ActionType.LIST_ADD: "list_adds",
    ActionType.RATING: "ratings",
    ActionType.FINISHED: "finished",
    ActionType.SHARED: "shared",
}


def _format_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


__all__ = [
    "ActivityGroup",
    "Engagement",
    "ListGroup",
    "MediaActivityGroup",
    "Slide",
]
