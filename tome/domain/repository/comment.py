"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from tome.domain.model.comment import Comment
from tome.domain.value import CharacterId, CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer. Every operation is a
    single transaction from the caller's point of view.
    """

    @abstractmethod
    async def initialize(self) -> None:
        """Ensure the backing schema exists.

        Must be idempotent: it runs on every process start.
        """
        pass

    @abstractmethod
    async def create(
        self,
        character_id: CharacterId,
        parent_id: Optional[CommentId],
        nickname: str,
        content: str,
    ) -> Comment:
        """Insert a new comment.

        The store assigns the id and creation timestamp. ``parent_id`` is
        stored as given, without checking that it exists.

        Args:
            character_id: Character the comment belongs to
            parent_id: Comment being replied to (None for top-level)
            nickname: Trimmed display name
            content: Trimmed comment body

        Returns:
            The comment as stored
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_character(self, character_id: CharacterId) -> List[Comment]:
        """Find all comments for a character in creation order.

        Rows are ordered by created_at ascending with ties broken by id.

        Args:
            character_id: The character key

        Returns:
            Flat list of comments, oldest first
        """
        pass

    @abstractmethod
    async def count_by_character(self, character_id: CharacterId) -> int:
        """Count every comment (top-level and replies) for a character.

        Args:
            character_id: The character key

        Returns:
            Number of comments
        """
        pass

    @abstractmethod
    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Delete a comment together with all of its replies, at any depth.

        Either the whole subtree goes or nothing does.

        Args:
            comment_id: Root of the subtree to delete

        Returns:
            Number of comments removed (0 if the comment no longer exists)
        """
        pass
