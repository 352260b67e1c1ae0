"""Public helpers for emitting domain notifications."""

from .events import notify_comment_created, notify_post_liked

__all__ = ["notify_comment_created", "notify_post_liked"]
