"""Utility helpers to generate and persist engagement notifications."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from consumed.application.use_cases.feed.display_names import get_display_name
from consumed.domain.entities import Comment, Notification, SocialPost, User
from consumed.infrastructure.repositories import NotificationRepository
from consumed.utils import now_in_app_timezone

logger = logging.getLogger(__name__)


def _persist_notification(
    session: Session,
    *,
    user_id: int,
    event_type: str,
    title: str,
    message: str,
    payload: dict | None = None,
) -> Notification:
    notification = Notification(
        id=None,
        user_id=user_id,
        event_type=event_type,
        title=title,
        message=message,
        payload=payload or {},
        created_at=now_in_app_timezone(),
        read_at=None,
    )
    saved = NotificationRepository(session).create(notification)
    logger.info("Notification %s sent to user %s", event_type, user_id)
    return saved


def notify_post_liked(
    session: Session, *, post: SocialPost, liker: User
) -> Notification | None:
    """Tell the post owner that ``liker`` liked their post."""

    if post.user_id == liker.id:
        return None
    name = get_display_name(liker.display_name, liker.username)
    return _persist_notification(
        session,
        user_id=post.user_id,
        event_type="like",
        title="New like",
        message=f"{name} liked your post",
        payload={"post_id": post.id, "triggered_by_user_id": liker.id},
    )


def notify_comment_created(
    session: Session,
    *,
    post: SocialPost,
    comment: Comment,
    author: User,
    parent: Comment | None = None,
) -> Notification | None:
    """Notify the parent comment author for replies, the post owner otherwise."""

    name = get_display_name(author.display_name, author.username)
    if parent is not None:
        recipient_id = parent.user_id
        event_type = "comment_reply"
        message = f"{name} replied to your comment"
    else:
        recipient_id = post.user_id
        event_type = "comment"
        message = f"{name} commented on your post"

    if recipient_id == author.id:
        return None
    return _persist_notification(
        session,
        user_id=recipient_id,
        event_type=event_type,
        title="New comment",
        message=message,
        payload={
            "post_id": post.id,
            "comment_id": comment.id,
            "triggered_by_user_id": author.id,
        },
    )
