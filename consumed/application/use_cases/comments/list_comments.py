"""Use case returning the comment thread of a post."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from consumed.domain.entities import Comment
from consumed.infrastructure.repositories import CommentRepository, SocialPostRepository


def build_comment_tree(comments: Sequence[Comment]) -> list[Comment]:
    """Nest ``comments`` under their parents preserving the input order.

    Replies whose parent is not part of ``comments`` are promoted to roots.
    """

    by_id = {comment.id: comment for comment in comments}
    for comment in comments:
        comment.replies = []

    roots: list[Comment] = []
    for comment in comments:
        parent = by_id.get(comment.parent_comment_id) if comment.parent_comment_id else None
        if parent is not None and parent is not comment:
            parent.replies.append(comment)
        else:
            roots.append(comment)
    return roots


def list_comments(session: Session, *, post_id: int) -> list[Comment]:
    """Return the comments of ``post_id`` as a tree ordered by creation."""

    if SocialPostRepository(session).get(post_id) is None:
        raise LookupError("Post not found")
    return build_comment_tree(CommentRepository(session).list_for_post(post_id))
