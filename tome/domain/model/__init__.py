"""Domain model entities."""

from tome.domain.model.comment import Comment

__all__ = [
    "Comment",
]
