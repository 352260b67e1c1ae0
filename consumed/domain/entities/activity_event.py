"""Raw user actions consumed by the activity feed."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import ClassVar, Union

from .media_item import MediaItem


class ActionType(str, Enum):
    """Kinds of user actions the feed knows how to consolidate."""

    LIST_ADD = "list_add"
    RATING = "rating"
    FINISHED = "finished"
    SHARED = "shared"


@dataclass(frozen=True)
class _BaseEvent:
    id: str
    user_id: str
    media_item: MediaItem
    timestamp: datetime | str

    action_type: ClassVar[ActionType]


@dataclass(frozen=True)
class ListAddEvent(_BaseEvent):
    """The user added ``media_item`` to one of their lists."""

    list_name: str | None = None
    list_id: str | None = None

    action_type: ClassVar[ActionType] = ActionType.LIST_ADD


@dataclass(frozen=True)
class RatingEvent(_BaseEvent):
    """The user rated ``media_item``; the score lives on the item."""

    action_type: ClassVar[ActionType] = ActionType.RATING

    @property
    def rating(self) -> float | None:
        return self.media_item.rating


@dataclass(frozen=True)
class FinishedEvent(_BaseEvent):
    """The user finished consuming ``media_item``."""

    action_type: ClassVar[ActionType] = ActionType.FINISHED


@dataclass(frozen=True)
class SharedActivityEvent(_BaseEvent):
    """An action of a kind the feed has no dedicated card for."""

    raw_action_type: str = ""

    action_type: ClassVar[ActionType] = ActionType.SHARED


RawEvent = Union[ListAddEvent, RatingEvent, FinishedEvent, SharedActivityEvent]


__all__ = [
    "ActionType",
    "FinishedEvent",
    "ListAddEvent",
    "RatingEvent",
    "RawEvent",
    "SharedActivityEvent",
]
