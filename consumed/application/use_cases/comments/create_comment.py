"""Use case for commenting on a social post."""

from __future__ import annotations

from sqlalchemy.orm import Session

from consumed.application.use_cases.notifications import notify_comment_created
from consumed.domain.entities import Comment, User
from consumed.infrastructure.repositories import CommentRepository, SocialPostRepository
from consumed.utils import now_in_app_timezone


def create_comment(
    session: Session,
    *,
    post_id: int,
    author: User,
    content: str,
    parent_comment_id: int | None = None,
) -> Comment:
    """Store a comment (or a reply when ``parent_comment_id`` is given)."""

    text = (content or "").strip()
    if not text:
        raise ValueError("Comment content is required")

    post_repository = SocialPostRepository(session)
    post = post_repository.get(post_id)
    if post is None:
        raise LookupError("Post not found")

    comment_repository = CommentRepository(session)
    parent = None
    if parent_comment_id is not None:
        parent = comment_repository.get(parent_comment_id)
        if parent is None or parent.post_id != post_id:
            raise ValueError("Parent comment does not belong to this post")

    comment = comment_repository.create(
        Comment(
            id=None,
            post_id=post_id,
            user_id=author.id,
            content=text,
            parent_comment_id=parent_comment_id,
            created_at=now_in_app_timezone(),
        )
    )
    post_repository.increment_comments(post_id)
    notify_comment_created(
        session, post=post, comment=comment, author=author, parent=parent
    )
    return comment
