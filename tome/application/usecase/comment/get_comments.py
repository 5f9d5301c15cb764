"""Get comments use case."""

from pydantic import BaseModel, ConfigDict, Field

from tome.application.usecase.base import BaseUseCase
from tome.application.usecase.comment.create_comment import CommentResponse
from tome.domain.service import CommentNode, CommentService
from tome.domain.value import CharacterId


class CommentNodeResponse(CommentResponse):
    """Comment with its replies, recursively, oldest first."""

    replies: list["CommentNodeResponse"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentNodeResponse":
        """Convert a domain CommentNode to response model.

        Args:
            node: Domain comment tree node

        Returns:
            Response model with replies recursively converted
        """
        comment = node.comment
        return cls(
            id=comment.id,
            character_id=comment.character_id,
            parent_id=comment.parent_id,
            nickname=comment.nickname,
            content=comment.content,
            created_at=comment.created_at,
            replies=[cls.from_node(reply) for reply in node.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    character_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response.

    ``count`` covers every comment for the character, replies included.
    """

    model_config = ConfigDict(populate_by_name=True)

    character_id: str = Field(alias="characterId")
    count: int
    comments: list[CommentNodeResponse]


class GetCommentsUseCase(BaseUseCase):
    """Use case for reading all comment threads of a character."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Steps:
        1. Rebuild the reply threads for the character
        2. Count all of the character's comments

        Args:
            request: Get comments request with character ID

        Returns:
            Threads with roots and replies in creation order, plus total count
        """
        character_id = CharacterId(request.character_id)

        roots = await self.comment_service.list_by_character(character_id)
        count = await self.comment_service.count_by_character(character_id)

        return GetCommentsResponse(
            character_id=request.character_id,
            count=count,
            comments=[CommentNodeResponse.from_node(root) for root in roots],
        )
