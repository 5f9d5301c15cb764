"""Domain value objects for comments."""

from tome.domain.value.identifiers import CharacterId, CommentId
from tome.domain.value.types import (
    CHARACTER_ID_MAX_LENGTH,
    CONTENT_MAX_LENGTH,
    NICKNAME_MAX_LENGTH,
)

__all__ = [
    # Identifiers
    "CharacterId",
    "CommentId",
    # Constraints
    "CHARACTER_ID_MAX_LENGTH",
    "CONTENT_MAX_LENGTH",
    "NICKNAME_MAX_LENGTH",
]
