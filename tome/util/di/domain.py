"""Domain service providers."""

from dishka import Scope, provide

from tome.domain.repository import CommentRepository
from tome.domain.service import CommentService
from tome.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """CommentService per scope, bound to that scope's repository."""

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        return CommentService(comment_repository=comment_repository)
