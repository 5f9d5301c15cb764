"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, Request, status
from pydantic import BaseModel, ConfigDict, Field

from tome.application.usecase.comment import (
    CommentResponse,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from tome.domain.error import AuthorizationError, NotFoundError
from tome.interface.api.rate_limit import get_create_rate_limit, limiter
from tome.interface.api.validation import (
    normalize_content,
    normalize_nickname,
    validate_character_id,
    validate_comment_id,
    validate_parent_id,
)
from tome.persistence.error import StorageFailure

router = APIRouter(prefix="/api/comments", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment.

    Fields are loosely typed on purpose; they are checked by the
    validation helpers so clients get the same messages for every
    malformed value.
    """

    model_config = ConfigDict(populate_by_name=True)

    character_id: str | int | None = Field(default=None, alias="characterId")
    parent_id: int | str | None = Field(default=None, alias="parentId")
    nickname: str | None = None
    content: str | None = None


@router.get("/{character_id}", response_model=GetCommentsResponse)
async def get_comments(
    character_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """Get all comment threads for a character.

    Top-level comments and replies are both in creation order. Replies whose
    parent no longer exists are listed as top-level comments.

    Args:
        character_id: Numeric character ID
        get_comments_use_case: Get comments use case from DI

    Returns:
        Character ID, total comment count and the comment threads
    """
    request = GetCommentsRequest(character_id=validate_character_id(character_id))
    try:
        return await get_comments_use_case.execute(request)
    except StorageFailure as e:
        logfire.error("Error fetching comments", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to fetch comments",
        )


@router.post(
    "",
    response_model=CommentResponse,
    status_code=status.HTTP_201_CREATED,
)
# Counts toward the global limit as well as the stricter create limit
@limiter.limit(get_create_rate_limit, override_defaults=False)
async def create_comment(
    request: Request,
    payload: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    x_nickname: str | None = Header(default=None),
) -> CommentResponse:
    """Create a comment on a character or reply to another comment.

    The nickname comes from the X-Nickname header when present, otherwise
    from the body. A parentId that does not exist is accepted.

    Args:
        request: Incoming request (used for rate limiting)
        payload: Comment creation data
        create_comment_use_case: Create comment use case from DI
        x_nickname: Nickname header

    Returns:
        The stored comment
    """
    use_case_request = CreateCommentRequest(
        character_id=validate_character_id(payload.character_id),
        nickname=normalize_nickname(x_nickname or payload.nickname),
        content=normalize_content(payload.content),
        parent_id=validate_parent_id(payload.parent_id),
    )
    try:
        return await create_comment_use_case.execute(use_case_request)
    except StorageFailure as e:
        logfire.error("Error creating comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to create comment",
        )


@router.delete("/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    x_nickname: str | None = Header(default=None),
) -> DeleteCommentResponse:
    """Delete a comment and all of its replies.

    Only the nickname the comment was posted with may delete it. Nicknames
    are not verified, so this guards against accidents, not impersonation.

    Args:
        comment_id: Numeric comment ID
        delete_comment_use_case: Delete comment use case from DI
        x_nickname: Nickname header (required)

    Returns:
        Success message

    Raises:
        HTTPException: 401 without a nickname, 403 on mismatch, 404 if missing
    """
    parsed_id = validate_comment_id(comment_id)

    if not x_nickname:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Nickname required for deletion",
        )

    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=parsed_id, nickname=x_nickname)
        )
    except NotFoundError as e:
        logfire.warn("Comment delete failed - not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Comment not found",
        )
    except AuthorizationError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except StorageFailure as e:
        logfire.error("Error deleting comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )
