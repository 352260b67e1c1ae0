"""Persistence helpers for social posts, likes and engagement counters."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from consumed.domain.entities import Engagement, SocialPost
from consumed.infrastructure.models import (
    PostCommentModel,
    PostLikeModel,
    SocialPostModel,
)
from consumed.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_timezone,
)


class SocialPostRepository:
    """Provide CRUD operations for :class:`SocialPost` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, post_id: int) -> SocialPost | None:
        model = self.session.get(SocialPostModel, post_id)
        return self._to_entity(model) if model else None

    def list_recent(
        self, *, limit: int = 20, user_id: int | None = None
    ) -> Sequence[SocialPost]:
        query = self.session.query(SocialPostModel)
        if user_id is not None:
            query = query.filter(SocialPostModel.user_id == user_id)
        query = query.order_by(
            SocialPostModel.created_at.desc(), SocialPostModel.id.desc()
        ).limit(limit)
        return [self._to_entity(model) for model in query.all()]

    def create(self, post: SocialPost) -> SocialPost:
        model = SocialPostModel()
        self._apply_entity_to_model(model, post)
        model.likes_count = 0
        model.comments_count = 0
        model.created_at = ensure_app_naive_datetime(
            post.created_at or now_in_app_timezone()
        )
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete(self, post_id: int) -> None:
        """Remove the post together with its likes and comments."""

        self.session.query(PostLikeModel).filter(
            PostLikeModel.post_id == post_id
        ).delete(synchronize_session=False)
        self.session.query(PostCommentModel).filter(
            PostCommentModel.post_id == post_id
        ).delete(synchronize_session=False)
        self.session.query(SocialPostModel).filter(
            SocialPostModel.id == post_id
        ).delete(synchronize_session=False)
        self.session.commit()

    def has_like(self, post_id: int, user_id: int) -> bool:
        return (
            self.session.query(PostLikeModel.id)
            .filter(PostLikeModel.post_id == post_id, PostLikeModel.user_id == user_id)
            .first()
            is not None
        )

    def add_like(self, post_id: int, user_id: int) -> int:
        """Store the like and return the updated like counter."""

        model = self._require_model(post_id)
        self.session.add(PostLikeModel(post_id=post_id, user_id=user_id))
        model.likes_count = (model.likes_count or 0) + 1
        try:
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            raise ValueError("Already liked") from exc
        return model.likes_count

    def remove_like(self, post_id: int, user_id: int) -> int:
        """Delete the like if present and return the updated like counter."""

        model = self._require_model(post_id)
        removed = (
            self.session.query(PostLikeModel)
            .filter(PostLikeModel.post_id == post_id, PostLikeModel.user_id == user_id)
            .delete(synchronize_session=False)
        )
        if removed and (model.likes_count or 0) > 0:
            model.likes_count -= 1
        self.session.commit()
        return model.likes_count

    def increment_comments(self, post_id: int) -> None:
        model = self._require_model(post_id)
        model.comments_count = (model.comments_count or 0) + 1
        self.session.commit()

    def get_engagement(
        self, post_ids: Sequence[int], *, current_user_id: int | None = None
    ) -> dict[str, Engagement]:
        """Return like/comment counters keyed by the post id as a string."""

        if not post_ids:
            return {}

        unique_ids = {int(post_id) for post_id in post_ids}
        counters = (
            self.session.query(
                SocialPostModel.id,
                SocialPostModel.likes_count,
                SocialPostModel.comments_count,
            )
            .filter(SocialPostModel.id.in_(unique_ids))
            .all()
        )
        liked: set[int] = set()
        if current_user_id is not None:
            liked = {
                post_id
                for (post_id,) in self.session.query(PostLikeModel.post_id)
                .filter(PostLikeModel.post_id.in_(unique_ids))
                .filter(PostLikeModel.user_id == current_user_id)
                .all()
            }
        return {
            str(row.id): Engagement(
                likes=row.likes_count or 0,
                comments=row.comments_count or 0,
                liked_by_current_user=row.id in liked,
            )
            for row in counters
        }

    def _require_model(self, post_id: int) -> SocialPostModel:
        model = self.session.get(SocialPostModel, post_id)
        if model is None:
            msg = f"Post with id {post_id} not found"
            raise LookupError(msg)
        return model

    @staticmethod
    def _apply_entity_to_model(model: SocialPostModel, post: SocialPost) -> None:
        model.user_id = post.user_id
        model.post_type = post.post_type
        model.content = post.content
        model.media_title = post.media_title
        model.media_type = post.media_type
        model.media_creator = post.media_creator
        model.media_image = post.media_image
        model.media_external_id = post.media_external_id
        model.media_external_source = post.media_external_source
        model.rating = post.rating
        model.list_name = post.list_name
        model.list_id = post.list_id

    @staticmethod
    def _to_entity(model: SocialPostModel) -> SocialPost:
        return SocialPost(
            id=model.id,
            user_id=model.user_id,
            post_type=model.post_type,
            content=model.content,
            media_title=model.media_title,
            media_type=model.media_type,
            media_creator=model.media_creator,
            media_image=model.media_image,
            media_external_id=model.media_external_id,
            media_external_source=model.media_external_source,
            rating=model.rating,
            list_name=model.list_name,
            list_id=model.list_id,
            likes_count=model.likes_count or 0,
            comments_count=model.comments_count or 0,
            created_at=ensure_app_timezone(model.created_at),
        )


__all__ = ["SocialPostRepository"]
