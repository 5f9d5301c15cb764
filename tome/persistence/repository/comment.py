"""SQL implementation of Comment repository."""

from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from sqlalchemy import delete, func, insert, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from tome.domain.model import Comment
from tome.domain.repository import CommentRepository
from tome.domain.value import CharacterId, CommentId
from tome.persistence.database import create_schema
from tome.persistence.error import StorageFailure
from tome.persistence.mappers import row_to_comment
from tome.persistence.tables import comments_table


class SqlCommentRepository(CommentRepository):
    """SQLAlchemy Core implementation of CommentRepository.

    Each operation commits its own transaction, so a result handed back to
    the caller is already durable.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[None]:
        """Commit on success, roll back and wrap driver errors on failure."""
        try:
            yield
            await self.session.commit()
        except SQLAlchemyError as e:
            await self.session.rollback()
            raise StorageFailure(operation, e) from e

    async def initialize(self) -> None:
        """Create the comments table and its indexes if missing."""
        async with self._transaction("initialize"):
            await self.session.run_sync(
                lambda sync_session: create_schema(sync_session.connection())
            )

    async def create(
        self,
        character_id: CharacterId,
        parent_id: Optional[CommentId],
        nickname: str,
        content: str,
    ) -> Comment:
        """Insert a comment and return it with id and timestamp filled in."""
        stmt = (
            insert(comments_table)
            .values(
                character_id=character_id,
                parent_id=parent_id,
                nickname=nickname,
                content=content,
            )
            .returning(*comments_table.c)
        )
        async with self._transaction("create"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict())

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        async with self._transaction("find_by_id"):
            result = await self.session.execute(stmt)
            row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_by_character(self, character_id: CharacterId) -> List[Comment]:
        """Find all comments for a character, oldest first."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.character_id == character_id)
            # Timestamps can collide; id keeps the order stable
            .order_by(comments_table.c.created_at.asc(), comments_table.c.id.asc())
        )
        async with self._transaction("find_by_character"):
            result = await self.session.execute(stmt)
            rows = result.fetchall()
        return [row_to_comment(row._asdict()) for row in rows]

    async def count_by_character(self, character_id: CharacterId) -> int:
        """Count comments for a character."""
        stmt = (
            select(func.count())
            .select_from(comments_table)
            .where(comments_table.c.character_id == character_id)
        )
        async with self._transaction("count_by_character"):
            result = await self.session.execute(stmt)
            count = result.scalar()
        return count or 0

    async def delete_subtree(self, comment_id: CommentId) -> int:
        """Delete a comment and every reply beneath it in one statement.

        The subtree is collected with a recursive CTE over parent_id. UNION
        (not UNION ALL) stops the recursion if parent links ever form a cycle.
        """
        anchor = comments_table.alias("anchor")
        subtree = (
            select(anchor.c.id)
            .where(anchor.c.id == comment_id)
            .cte("subtree", recursive=True)
        )
        replies = comments_table.alias("replies")
        subtree = subtree.union(
            select(replies.c.id).where(replies.c.parent_id == subtree.c.id)
        )
        # Count the RETURNING rows; sqlite3 reports rowcount -1 for WITH ... DELETE
        stmt = (
            delete(comments_table)
            .where(comments_table.c.id.in_(select(subtree.c.id)))
            .returning(comments_table.c.id)
        )
        async with self._transaction("delete_subtree"):
            result = await self.session.execute(stmt)
            removed = len(result.fetchall())
        return removed
