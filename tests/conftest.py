"""Test configuration and fixtures."""

import os
from datetime import datetime, timedelta, timezone

import logfire

# Must be set before the app module reads settings
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("RATE_LIMIT__ENABLED", "false")

logfire.configure(send_to_logfire=False, console=False)

from tome.domain.model import Comment  # noqa: E402
from tome.domain.value import CharacterId, CommentId  # noqa: E402

_BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def make_comment(
    comment_id: int,
    parent_id: int | None = None,
    character_id: str = "12345",
    nickname: str = "alice",
    content: str | None = None,
    created_at: datetime | None = None,
) -> Comment:
    """Helper function to build comments for tree tests.

    By default ``created_at`` grows with the id, matching what the store
    assigns.

    Args:
        comment_id: Comment id
        parent_id: Parent comment id (None for top-level)
        character_id: Character key
        nickname: Author nickname
        content: Body (defaults to "comment <id>")
        created_at: Creation timestamp

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(comment_id),
        character_id=CharacterId(character_id),
        parent_id=CommentId(parent_id) if parent_id is not None else None,
        nickname=nickname,
        content=content or f"comment {comment_id}",
        created_at=created_at or _BASE_TIME + timedelta(seconds=comment_id),
    )
