"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from tome.domain.repository.comment import CommentRepository

__all__ = [
    "CommentRepository",
]
