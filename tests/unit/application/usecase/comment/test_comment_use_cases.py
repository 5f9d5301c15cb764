"""Unit tests for comment use cases."""

import pytest

from tome.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from tome.domain.error import AuthorizationError, NotFoundError
from tome.domain.repository import CommentRepository
from tome.domain.value import CharacterId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_comment_returns_stored_comment(self, unit_env):
        """Should return the comment as stored, with id and timestamp."""
        # Arrange
        use_case = await unit_env.get(CreateCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        # Act
        result = await use_case.execute(
            CreateCommentRequest(character_id="12345", nickname="alice", content="hi")
        )

        # Assert
        assert result.id is not None
        assert result.character_id == "12345"
        assert result.parent_id is None
        assert result.nickname == "alice"
        assert result.content == "hi"

        saved = await comment_repo.find_by_id(result.id)
        assert saved is not None
        assert saved.created_at == result.created_at

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        """Should keep the parent id on replies."""
        use_case = await unit_env.get(CreateCommentUseCase)
        parent = await use_case.execute(
            CreateCommentRequest(character_id="12345", nickname="alice", content="hi")
        )

        reply = await use_case.execute(
            CreateCommentRequest(
                character_id="12345",
                nickname="bob",
                content="hey",
                parent_id=parent.id,
            )
        )

        assert reply.parent_id == parent.id


class TestGetCommentsUseCase:
    """Tests for GetCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_returns_threads_and_total_count(self, unit_env):
        """Count includes replies; only roots are at the top level."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)

        root = await create.execute(
            CreateCommentRequest(character_id="12345", nickname="alice", content="hi")
        )
        reply = await create.execute(
            CreateCommentRequest(
                character_id="12345", nickname="bob", content="hey", parent_id=root.id
            )
        )
        await create.execute(
            CreateCommentRequest(
                character_id="12345", nickname="alice", content="lol", parent_id=reply.id
            )
        )

        # Act
        result = await get_comments.execute(GetCommentsRequest(character_id="12345"))

        # Assert
        assert result.character_id == "12345"
        assert result.count == 3
        assert len(result.comments) == 1
        assert result.comments[0].id == root.id
        assert result.comments[0].replies[0].id == reply.id
        assert result.comments[0].replies[0].replies[0].content == "lol"

    @pytest.mark.asyncio
    async def test_serializes_character_id_in_camel_case(self, unit_env):
        """Top-level key is characterId; node keys stay snake_case."""
        create = await unit_env.get(CreateCommentUseCase)
        get_comments = await unit_env.get(GetCommentsUseCase)
        await create.execute(
            CreateCommentRequest(character_id="42", nickname="alice", content="hi")
        )

        result = await get_comments.execute(GetCommentsRequest(character_id="42"))
        data = result.model_dump(by_alias=True)

        assert data["characterId"] == "42"
        assert data["count"] == 1
        node = data["comments"][0]
        assert set(node) == {
            "id",
            "character_id",
            "parent_id",
            "nickname",
            "content",
            "created_at",
            "replies",
        }
        assert node["replies"] == []

    @pytest.mark.asyncio
    async def test_empty_character(self, unit_env):
        """Unknown characters give an empty response."""
        get_comments = await unit_env.get(GetCommentsUseCase)

        result = await get_comments.execute(GetCommentsRequest(character_id="1"))

        assert result.count == 0
        assert result.comments == []


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_own_comment(self, unit_env):
        """Author can delete their comment together with its replies."""
        # Arrange
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)

        root = await create.execute(
            CreateCommentRequest(character_id="12345", nickname="alice", content="hi")
        )
        await create.execute(
            CreateCommentRequest(
                character_id="12345", nickname="bob", content="hey", parent_id=root.id
            )
        )

        # Act
        result = await delete.execute(
            DeleteCommentRequest(comment_id=root.id, nickname="alice")
        )

        # Assert
        assert result.success is True
        assert result.message == "Comment deleted"
        assert await comment_repo.count_by_character(CharacterId("12345")) == 0

    @pytest.mark.asyncio
    async def test_delete_with_other_nickname_fails(self, unit_env):
        """Should raise AuthorizationError for a different nickname."""
        create = await unit_env.get(CreateCommentUseCase)
        delete = await unit_env.get(DeleteCommentUseCase)
        comment = await create.execute(
            CreateCommentRequest(character_id="12345", nickname="alice", content="hi")
        )

        with pytest.raises(AuthorizationError):
            await delete.execute(
                DeleteCommentRequest(comment_id=comment.id, nickname="mallory")
            )

    @pytest.mark.asyncio
    async def test_delete_missing_comment_fails(self, unit_env):
        """Should raise NotFoundError for unknown ids."""
        delete = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await delete.execute(DeleteCommentRequest(comment_id=123, nickname="alice"))
