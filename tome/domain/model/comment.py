"""Comment entity.

Comments hang off an external character id and form reply threads of
unlimited depth through ``parent_id``. The parent reference is not checked
when a comment is written; unresolvable parents are handled when the thread
is read back.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from tome.domain.model.common import DomainModel
from tome.domain.value import (
    CONTENT_MAX_LENGTH,
    NICKNAME_MAX_LENGTH,
    CharacterId,
    CommentId,
)


class Comment(DomainModel):
    """Comment entity.

    A comment is never changed after creation; it can only be deleted,
    which also deletes every reply beneath it.
    """

    id: CommentId
    character_id: CharacterId
    parent_id: Optional[CommentId] = None  # None for top-level comments
    nickname: str = Field(min_length=1, max_length=NICKNAME_MAX_LENGTH)
    content: str = Field(min_length=1, max_length=CONTENT_MAX_LENGTH)
    created_at: datetime
