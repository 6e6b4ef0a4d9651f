"""Application layer DI providers."""

from dishka import Scope, provide

from modcomment.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsByParentUseCase,
    UpdateCommentUseCase,
)
from modcomment.domain.repository import CommentRepository
from modcomment.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comments_by_parent_use_case(
        self, comment_repository: CommentRepository
    ) -> GetCommentsByParentUseCase:
        """Provide get comments by parent use case."""
        return GetCommentsByParentUseCase(comment_repository=comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_repository: CommentRepository
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_repository=comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_repository: CommentRepository
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_repository=comment_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_repository: CommentRepository
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_repository=comment_repository)
