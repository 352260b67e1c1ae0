"""Use cases for social posts."""

from .create_post import create_post
from .delete_post import delete_post
from .like_post import like_post, unlike_post

__all__ = ["create_post", "delete_post", "like_post", "unlike_post"]
