"""ORM models used by the application infrastructure."""

from .user import UserModel
from .social_post import PostCommentModel, PostLikeModel, SocialPostModel
from .notification import NotificationModel

__all__ = [
    "NotificationModel",
    "PostCommentModel",
    "PostLikeModel",
    "SocialPostModel",
    "UserModel",
]
