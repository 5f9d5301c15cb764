"""Create comment use case."""

from datetime import datetime

from pydantic import BaseModel

from tome.application.usecase.base import BaseUseCase
from tome.domain.model import Comment
from tome.domain.service import CommentService
from tome.domain.value import CharacterId, CommentId


class CommentResponse(BaseModel):
    """A single comment as returned to clients."""

    id: int
    character_id: str
    parent_id: int | None
    nickname: str
    content: str
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentResponse":
        """Convert a domain Comment to its response model."""
        return cls(
            id=comment.id,
            character_id=comment.character_id,
            parent_id=comment.parent_id,
            nickname=comment.nickname,
            content=comment.content,
            created_at=comment.created_at,
        )


class CreateCommentRequest(BaseModel):
    """Create comment request.

    All fields are already validated and trimmed by the API layer.
    """

    character_id: str
    nickname: str
    content: str
    parent_id: int | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for posting a comment on a character or replying to one."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentResponse:
        """Execute create comment flow.

        A parent_id that does not resolve is accepted; the comment is shown
        as top-level when the thread is read.

        Args:
            request: Create comment request

        Returns:
            The stored comment
        """
        comment = await self.comment_service.create_comment(
            character_id=CharacterId(request.character_id),
            nickname=request.nickname,
            content=request.content,
            parent_id=(
                CommentId(request.parent_id) if request.parent_id is not None else None
            ),
        )
        return CommentResponse.from_domain(comment)
