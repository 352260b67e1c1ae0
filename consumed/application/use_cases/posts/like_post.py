"""Use cases for liking and unliking social posts."""

import logging

from sqlalchemy.orm import Session

from consumed.application.use_cases.notifications import notify_post_liked
from consumed.domain.entities import User
from consumed.infrastructure.repositories import SocialPostRepository

logger = logging.getLogger(__name__)


def like_post(session: Session, *, post_id: int, user: User) -> int:
    """Like ``post_id`` on behalf of ``user`` and return the new like count."""

    repository = SocialPostRepository(session)
    post = repository.get(post_id)
    if post is None:
        raise LookupError("Post not found")
    if repository.has_like(post_id, user.id):
        raise ValueError("Already liked")

    likes = repository.add_like(post_id, user.id)
    logger.info("User %s liked post %s", user.id, post_id)
    notify_post_liked(session, post=post, liker=user)
    return likes


def unlike_post(session: Session, *, post_id: int, user: User) -> int:
    """Remove ``user``'s like from ``post_id`` and return the new like count."""

    repository = SocialPostRepository(session)
    if repository.get(post_id) is None:
        raise LookupError("Post not found")
    return repository.remove_like(post_id, user.id)
