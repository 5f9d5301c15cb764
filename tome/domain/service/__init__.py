"""Domain services."""

from .base import Service
from .comment_service import CommentNode, CommentService, build_comment_tree

__all__ = [
    "CommentNode",
    "CommentService",
    "Service",
    "build_comment_tree",
]
