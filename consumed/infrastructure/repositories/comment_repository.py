"""Persistence helpers for post comments."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.orm import Session

from consumed.domain.entities import Comment
from consumed.infrastructure.models import PostCommentModel
from consumed.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class CommentRepository:
    """Provide read and write access to :class:`Comment` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, comment_id: int) -> Comment | None:
        model = self.session.get(PostCommentModel, comment_id)
        return self._to_entity(model) if model else None

    def list_for_post(self, post_id: int) -> Sequence[Comment]:
        query = (
            self.session.query(PostCommentModel)
            .filter(PostCommentModel.post_id == post_id)
            .order_by(PostCommentModel.created_at.asc(), PostCommentModel.id.asc())
        )
        return [self._to_entity(model) for model in query.all()]

    def create(self, comment: Comment) -> Comment:
        model = PostCommentModel(
            post_id=comment.post_id,
            user_id=comment.user_id,
            parent_comment_id=comment.parent_comment_id,
            content=comment.content,
            created_at=ensure_app_naive_datetime(
                comment.created_at or now_in_app_timezone()
            ),
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: PostCommentModel) -> Comment:
        username = None
        if model.user is not None:
            username = model.user.username or model.user.email.split("@")[0]
        return Comment(
            id=model.id,
            post_id=model.post_id,
            user_id=model.user_id,
            content=model.content,
            parent_comment_id=model.parent_comment_id,
            created_at=ensure_app_timezone(model.created_at),
            username=username,
        )


__all__ = ["CommentRepository"]
