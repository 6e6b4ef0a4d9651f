"""Get comments by parent use case."""

from modcomment.application.usecase.base import BaseUseCase
from modcomment.application.usecase.comment.wire import (
    WireComment,
    WireModel,
    comments_to_wire,
)
from modcomment.domain.model import require_uuid
from modcomment.domain.repository import CommentRepository


class GetCommentsByParentRequest(WireModel):
    """Get comments request."""

    parent_id: str = ""  # Mod UUID


class GetCommentsByParentResponse(WireModel):
    """Get comments response."""

    comments: list[WireComment] = []


class GetCommentsByParentUseCase(BaseUseCase):
    """Use case for listing the live comments of a mod."""

    operation = "GetCommentsByParent"

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize get comments use case.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def execute(
        self, request: GetCommentsByParentRequest
    ) -> GetCommentsByParentResponse:
        """Execute get comments flow.

        Args:
            request: Request with the mod ID

        Returns:
            Comments of the mod, possibly none

        Raises:
            ValidationError: If parent_id is not a UUID
            StorageError: If the query fails
        """
        with self.observe(parent_id=request.parent_id) as result:
            parent_id = require_uuid("parent_id", request.parent_id)

            comments = await self.comment_repository.search_by_parent(parent_id)
            result["count"] = len(comments)

            return GetCommentsByParentResponse(comments=comments_to_wire(comments))
