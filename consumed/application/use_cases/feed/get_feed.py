"""Use case assembling the consolidated activity feed."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime

from sqlalchemy.orm import Session

from consumed.config import get_settings
from consumed.domain.entities import ActivityGroup, MediaActivityGroup, User
from consumed.infrastructure.repositories import SocialPostRepository, UserRepository
from consumed.utils import format_relative_date, now_in_app_timezone

from .consolidation import consolidate
from .events import events_from_posts
from .media_groups import group_by_media

logger = logging.getLogger(__name__)


@dataclass
class FeedPage:
    """Everything the client needs to render one page of the feed."""

    groups: list[ActivityGroup] = field(default_factory=list)
    media_groups: list[MediaActivityGroup] = field(default_factory=list)
    users: dict[str, User] = field(default_factory=dict)
    date_labels: dict[str, str] = field(default_factory=dict)
    generated_at: datetime | None = None


def get_feed(
    session: Session,
    *,
    current_user: User,
    limit: int | None = None,
    user_id: int | None = None,
    now: datetime | None = None,
) -> FeedPage:
    """Return the most recent activity, merged into cards.

    ``user_id`` restricts the feed to a single author (profile pages). ``now``
    only affects the relative date labels.
    """

    settings = get_settings()
    page_size = limit or settings.feed_page_size
    now = now or now_in_app_timezone()

    post_repository = SocialPostRepository(session)
    posts = post_repository.list_recent(limit=page_size, user_id=user_id)
    events = events_from_posts(posts)

    engagement = post_repository.get_engagement(
        [post.id for post in posts if post.id is not None],
        current_user_id=current_user.id,
    )
    groups = consolidate(
        events,
        settings.feed_window_seconds,
        engagement=engagement,
        preview_limit=settings.feed_preview_limit,
    )
    media_groups = group_by_media(events, preview_limit=settings.feed_preview_limit)

    authors = UserRepository(session).get_map_by_ids([post.user_id for post in posts])
    logger.debug(
        "Feed for user %s: %d posts consolidated into %d groups",
        current_user.id,
        len(posts),
        len(groups),
    )
    return FeedPage(
        groups=groups,
        media_groups=media_groups,
        users={str(author_id): author for author_id, author in authors.items()},
        date_labels={
            group.id: format_relative_date(group.timestamp, now) for group in groups
        },
        generated_at=now,
    )


__all__ = ["FeedPage", "get_feed"]
