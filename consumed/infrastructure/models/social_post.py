"""SQLAlchemy models for social posts and their engagement."""

from sqlalchemy import (
    Column,
    DateTime,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import relationship

from consumed.infrastructure.database import Base
from consumed.utils import now_in_app_naive_datetime


class SocialPostModel(Base):
    """A logged user action with its media embedded."""

    __tablename__ = "social_posts"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    post_type = Column(String(40), nullable=False, default="add-to-list")
    content = Column(Text, nullable=True)
    media_title = Column(String(255), nullable=True)
    media_type = Column(String(30), nullable=True)
    media_creator = Column(String(255), nullable=True)
    media_image = Column(String(500), nullable=True)
    media_external_id = Column(String(120), nullable=True)
    media_external_source = Column(String(40), nullable=True)
    rating = Column(Float, nullable=True)
    list_name = Column(String(80), nullable=True)
    list_id = Column(String(64), nullable=True)
    likes_count = Column(Integer, nullable=False, default=0)
    comments_count = Column(Integer, nullable=False, default=0)
    created_at = Column(
        DateTime, nullable=False, default=now_in_app_naive_datetime, index=True
    )

    user = relationship("UserModel", lazy="joined")


class PostLikeModel(Base):
    """A user's like on a social post."""

    __tablename__ = "social_post_likes"
    __table_args__ = (UniqueConstraint("post_id", "user_id", name="uq_post_like_user"),)

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(
        Integer,
        ForeignKey("social_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)


class PostCommentModel(Base):
    """A comment or reply left on a social post."""

    __tablename__ = "social_post_comments"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(
        Integer,
        ForeignKey("social_posts.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    parent_comment_id = Column(
        Integer,
        ForeignKey("social_post_comments.id", ondelete="CASCADE"),
        nullable=True,
    )
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=now_in_app_naive_datetime)

    user = relationship("UserModel", lazy="joined")


__all__ = ["PostCommentModel", "PostLikeModel", "SocialPostModel"]
