"""Use case for logging a user action as a social post."""

from __future__ import annotations

from sqlalchemy.orm import Session

from consumed.domain.entities import SocialPost, User
from consumed.infrastructure.repositories import SocialPostRepository
from consumed.utils import now_in_app_timezone


def create_post(
    session: Session,
    *,
    author: User,
    post_type: str,
    media_title: str,
    media_type: str | None = None,
    media_creator: str | None = None,
    media_image: str | None = None,
    media_external_id: str | None = None,
    media_external_source: str | None = None,
    rating: float | None = None,
    list_name: str | None = None,
    list_id: str | None = None,
    content: str | None = None,
) -> SocialPost:
    """Persist a new post authored by ``author``."""

    title = (media_title or "").strip()
    if not title:
        raise ValueError("A media title is required")
    if rating is not None and not 0 <= rating <= 5:
        raise ValueError("Rating must be between 0 and 5")

    post = SocialPost(
        id=None,
        user_id=author.id,
        post_type=post_type.strip().lower(),
        content=(content or "").strip() or None,
        media_title=title,
        media_type=media_type,
        media_creator=media_creator,
        media_image=media_image,
        media_external_id=media_external_id,
        media_external_source=media_external_source,
        rating=rating,
        list_name=list_name,
        list_id=list_id,
        created_at=now_in_app_timezone(),
    )
    return SocialPostRepository(session).create(post)
