"""Delete comment use case."""

from pydantic import BaseModel

from tome.application.usecase.base import BaseUseCase
from tome.domain.service import CommentService
from tome.domain.value import CommentId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: int
    nickname: str  # Nickname claimed by the caller


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    message: str


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment thread as its author."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Replies to the comment are deleted with it.

        Args:
            request: Delete comment request

        Returns:
            Success response

        Raises:
            NotFoundError: If the comment does not exist
            AuthorizationError: If the nickname does not match the author
        """
        await self.comment_service.delete_comment(
            comment_id=CommentId(request.comment_id),
            nickname=request.nickname,
        )
        return DeleteCommentResponse(success=True, message="Comment deleted")
