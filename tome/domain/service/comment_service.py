"""Comment domain service."""

from dataclasses import dataclass, field
from typing import Iterable

import logfire

from tome.domain.error import AuthorizationError, NotFoundError
from tome.domain.model.comment import Comment
from tome.domain.repository import CommentRepository
from tome.domain.value import CharacterId, CommentId

from .base import Service


@dataclass
class CommentNode:
    """A comment and its direct replies, oldest first."""

    comment: Comment
    replies: list["CommentNode"] = field(default_factory=list)


def _cycle_members(parents: dict[CommentId, CommentId]) -> set[CommentId]:
    """Ids whose parent chain leads back to themselves."""
    members: set[CommentId] = set()
    visiting, done = 1, 2
    state: dict[CommentId, int] = {}

    for start in parents:
        path: list[CommentId] = []
        current = start
        while current in parents and current not in state:
            state[current] = visiting
            path.append(current)
            current = parents[current]
        if state.get(current) == visiting:
            members.update(path[path.index(current):])
        for comment_id in path:
            state[comment_id] = done

    return members


def build_comment_tree(comments: Iterable[Comment]) -> list[CommentNode]:
    """Rebuild reply threads from a flat, oldest-first list of comments.

    Every comment is looked up first, then each one is attached to its
    parent wherever the parent sits in the list. A comment becomes a root
    when it has no parent, when the parent is not in the list (deleted,
    never existed, or on another character), or when its parent chain
    loops back to itself. Orphans are kept rather than dropped.

    Args:
        comments: Comments ordered by created_at, then id

    Returns:
        Root nodes in input order, each with replies in input order
    """
    nodes: dict[CommentId, CommentNode] = {
        comment.id: CommentNode(comment=comment) for comment in comments
    }
    parents = {
        comment_id: node.comment.parent_id
        for comment_id, node in nodes.items()
        if node.comment.parent_id is not None and node.comment.parent_id in nodes
    }
    looped = _cycle_members(parents)

    roots: list[CommentNode] = []
    for comment_id, node in nodes.items():
        parent_id = parents.get(comment_id)
        if parent_id is None or comment_id in looped:
            roots.append(node)
        else:
            nodes[parent_id].replies.append(node)

    return roots


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def initialize(self) -> None:
        """Make sure the comment store is ready for use."""
        with logfire.span("comment_service.initialize"):
            await self.comment_repository.initialize()
            logfire.info("Comment store initialized")

    async def create_comment(
        self,
        character_id: CharacterId,
        nickname: str,
        content: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        The parent is deliberately not looked up: a reply to a missing
        comment is stored and shows up as a top-level comment when read.

        Args:
            character_id: Character the comment is attached to
            nickname: Trimmed display name of the author
            content: Trimmed comment body
            parent_id: Comment being replied to (None for top-level)

        Returns:
            Created comment with its assigned id and timestamp
        """
        with logfire.span(
            "comment_service.create_comment",
            character_id=character_id,
            parent_id=parent_id,
        ):
            comment = await self.comment_repository.create(
                character_id=character_id,
                parent_id=parent_id,
                nickname=nickname,
                content=content,
            )
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                character_id=character_id,
                parent_id=parent_id,
            )
            return comment

    async def list_by_character(self, character_id: CharacterId) -> list[CommentNode]:
        """Get all comments for a character as reply threads.

        Args:
            character_id: Character key

        Returns:
            Root nodes (including orphaned replies) in creation order
        """
        with logfire.span(
            "comment_service.list_by_character", character_id=character_id
        ):
            comments = await self.comment_repository.find_by_character(character_id)
            roots = build_comment_tree(comments)
            logfire.info(
                "Comments retrieved for character",
                character_id=character_id,
                count=len(comments),
                roots=len(roots),
            )
            return roots

    async def count_by_character(self, character_id: CharacterId) -> int:
        """Count all comments and replies for a character."""
        with logfire.span(
            "comment_service.count_by_character", character_id=character_id
        ):
            return await self.comment_repository.count_by_character(character_id)

    async def delete_comment(self, comment_id: CommentId, nickname: str) -> int:
        """Delete a comment and its replies if the nickname matches.

        The nickname must equal the one the comment was created with,
        exactly (case-sensitive, no normalization).

        Args:
            comment_id: Comment ID
            nickname: Nickname claimed by the caller

        Returns:
            Number of comments removed, including cascaded replies

        Raises:
            NotFoundError: If the comment does not exist (or was deleted concurrently)
            AuthorizationError: If the nickname does not match
        """
        with logfire.span("comment_service.delete_comment", comment_id=comment_id):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found for delete", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            if comment.nickname != nickname:
                logfire.warn(
                    "Nickname mismatch on delete",
                    comment_id=comment_id,
                    character_id=comment.character_id,
                )
                raise AuthorizationError("comment", str(comment_id), nickname)

            removed = await self.comment_repository.delete_subtree(comment_id)
            if removed == 0:
                # Lost a race with another delete of the same comment
                logfire.warn("Comment already deleted", comment_id=comment_id)
                raise NotFoundError("Comment", str(comment_id))

            logfire.info(
                "Comment deleted",
                comment_id=comment_id,
                character_id=comment.character_id,
                removed=removed,
            )
            return removed
