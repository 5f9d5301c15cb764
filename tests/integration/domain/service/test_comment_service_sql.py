"""Integration tests for CommentService over a real SQLite database."""

import asyncio

import pytest
import pytest_asyncio

from tome.domain.error import NotFoundError
from tome.domain.repository import CommentRepository
from tome.domain.service import CommentService
from tome.domain.value import CharacterId, CommentId
from tests.di import build_test_container

CHARACTER = CharacterId("12345")


@pytest_asyncio.fixture
async def sql_container(tmp_path, monkeypatch):
    """App-scoped container on a fresh SQLite file.

    Each caller opens its own request scope, so concurrent operations get
    separate sessions and connections, as concurrent HTTP requests do.
    """
    monkeypatch.setenv("DATABASE__URL", f"sqlite+aiosqlite:///{tmp_path / 'comments.db'}")
    container = build_test_container(unmock={"persistence"})
    try:
        async with container() as scope:
            repository = await scope.get(CommentRepository)
            await repository.initialize()
        yield container
    finally:
        await container.close()


async def _create(container, nickname, content, parent_id=None):
    async with container() as scope:
        service = await scope.get(CommentService)
        return await service.create_comment(
            CHARACTER, nickname, content, parent_id=parent_id
        )


async def _delete(container, comment_id, nickname):
    async with container() as scope:
        service = await scope.get(CommentService)
        return await service.delete_comment(comment_id, nickname)


async def _count(container):
    async with container() as scope:
        service = await scope.get(CommentService)
        return await service.count_by_character(CHARACTER)


class TestDeleteCommentOnSql:
    """Tests for delete_comment against SQLite."""

    @pytest.mark.asyncio
    async def test_delete_reports_removed_rows(self, sql_container):
        """The removed count includes every cascaded reply."""
        # Arrange
        root = await _create(sql_container, "alice", "hi")
        reply = await _create(sql_container, "bob", "hey", parent_id=root.id)
        await _create(sql_container, "alice", "lol", parent_id=reply.id)

        # Act
        removed = await _delete(sql_container, root.id, "alice")

        # Assert
        assert removed == 3
        assert await _count(sql_container) == 0

    @pytest.mark.asyncio
    async def test_racing_deletes_at_most_one_succeeds(self, sql_container):
        """Two concurrent deletes of one comment: one wins, one gets NotFoundError."""
        # Arrange
        comment = await _create(sql_container, "alice", "hi")

        # Act
        results = await asyncio.gather(
            _delete(sql_container, comment.id, "alice"),
            _delete(sql_container, comment.id, "alice"),
            return_exceptions=True,
        )

        # Assert
        successes = [r for r in results if not isinstance(r, BaseException)]
        failures = [r for r in results if isinstance(r, NotFoundError)]
        assert successes == [1]
        assert len(failures) == 1
        assert await _count(sql_container) == 0

    @pytest.mark.asyncio
    async def test_delete_missing_raises_not_found(self, sql_container):
        """Unknown ids raise NotFoundError instead of reporting success."""
        await _create(sql_container, "alice", "hi")

        with pytest.raises(NotFoundError):
            await _delete(sql_container, CommentId(777), "alice")

        assert await _count(sql_container) == 1
