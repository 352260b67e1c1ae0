"""Repository implementations for infrastructure layer."""

from .comment_repository import CommentRepository
from .notification_repository import NotificationRepository
from .social_post_repository import SocialPostRepository
from .user_repository import UserRepository

__all__ = [
    "CommentRepository",
    "NotificationRepository",
    "SocialPostRepository",
    "UserRepository",
]
