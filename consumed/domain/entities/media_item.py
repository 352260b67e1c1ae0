"""Domain entity describing a piece of media attached to a user action."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MediaItem:
    """A movie, show, book, album, podcast or game referenced by an action.

    ``rating`` is ``None`` when the action carries no rating; ``0`` is a valid
    rating and must be kept.
    """

    id: str
    title: str
    media_type: str = ""
    creator: str = ""
    external_id: str = ""
    external_source: str = ""
    image_url: str = ""
    rating: float | None = None

    @property
    def has_rating(self) -> bool:
        return self.rating is not None

    @property
    def media_key(self) -> tuple[str, str]:
        """Identity of the underlying title across users."""

        if self.external_id:
            return (self.external_source.lower(), self.external_id)
        return ("title", self.title.strip().lower())


__all__ = ["MediaItem"]
