"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM mapping.
"""

from typing import Any, Dict

from tome.domain.model import Comment
from tome.domain.value import CharacterId, CommentId


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    parent_id = row.get("parent_id")
    return Comment(
        id=CommentId(int(row["id"])),
        character_id=CharacterId(str(row["character_id"])),
        parent_id=CommentId(int(parent_id)) if parent_id is not None else None,
        nickname=row["nickname"],
        content=row["content"],
        created_at=row["created_at"],
    )
