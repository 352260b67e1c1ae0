"""Use case for deleting a social post."""

import logging

from sqlalchemy.orm import Session

from consumed.domain.entities import User
from consumed.infrastructure.repositories import SocialPostRepository

logger = logging.getLogger(__name__)


def delete_post(session: Session, *, post_id: int, requester: User) -> None:
    """Delete ``post_id`` with its likes and comments.

    Raises ``LookupError`` when the post does not exist and ``PermissionError``
    when ``requester`` is not its author.
    """

    repository = SocialPostRepository(session)
    post = repository.get(post_id)
    if post is None:
        raise LookupError("Post not found")
    if post.user_id != requester.id:
        raise PermissionError("You can only delete your own posts")

    repository.delete(post_id)
    logger.info("User %s deleted post %s", requester.id, post_id)
