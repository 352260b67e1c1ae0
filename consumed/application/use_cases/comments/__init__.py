"""Use cases for post comments."""

from .create_comment import create_comment
from .list_comments import build_comment_tree, list_comments

__all__ = ["build_comment_tree", "create_comment", "list_comments"]
