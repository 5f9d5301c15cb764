"""In-memory comment repository for testing."""

from datetime import datetime, timezone
from itertools import count
from typing import Optional

from tome.domain.model.comment import Comment
from tome.domain.repository.comment import CommentRepository
from tome.domain.value import CharacterId, CommentId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    No operation awaits while it mutates state, so each one is atomic
    with respect to other coroutines on the same event loop.
    """

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self._ids = count(1)

    async def initialize(self) -> None:
        """Nothing to set up for an in-memory store."""
        pass

    async def create(
        self,
        character_id: CharacterId,
        parent_id: Optional[CommentId],
        nickname: str,
        content: str,
    ) -> Comment:
        """Store a new comment with the next id."""
        comment = Comment(
            id=CommentId(next(self._ids)),
            character_id=character_id,
            parent_id=parent_id,
            nickname=nickname,
            content=content,
            created_at=datetime.now(timezone.utc),
        )
        self._comments[comment.id] = comment
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_by_character(self, character_id: CharacterId) -> list[Comment]:
        """Find all comments for a character, oldest first."""
        comments = [
            c for c in self._comments.values() if c.character_id == character_id
        ]
        comments.sort(key=lambda c: (c.created_at, c.id))
        return comments

    async def count_by_character(self, character_id: CharacterId) -> int:
        """Count comments for a character."""
        return sum(1 for c in self._comments.values() if c.character_id == character_id)

    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Delete a comment and all descendants."""
        if comment_id not in self._comments:
            return 0

        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            parent_id = frontier.pop()
            for c in self._comments.values():
                if c.parent_id == parent_id and c.id not in doomed:
                    doomed.add(c.id)
                    frontier.append(c.id)

        for doomed_id in doomed:
            del self._comments[doomed_id]
        return len(doomed)
