"""SQL repository implementations."""

from tome.persistence.repository.comment import SqlCommentRepository

__all__ = [
    "SqlCommentRepository",
]
