"""Delete comment use case."""

from modcomment.application.usecase.base import BaseUseCase
from modcomment.application.usecase.comment.wire import WireModel
from modcomment.domain.model import require_uuid
from modcomment.domain.repository import CommentRepository


class DeleteCommentRequest(WireModel):
    """Delete comment request."""

    id: str = ""  # Comment UUID


class DeleteCommentResponse(WireModel):
    """Delete comment response (empty acknowledgment)."""

    pass


class DeleteCommentUseCase(BaseUseCase):
    """Use case for soft deleting a comment."""

    operation = "DeleteComment"

    def __init__(self, comment_repository: CommentRepository) -> None:
        self.comment_repository = comment_repository

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Soft delete a comment. Missing comments are a no-op.

        Raises:
            ValidationError: If id is not a UUID
            StorageError: If the update fails
        """
        with self.observe(comment_id=request.id):
            comment_id = require_uuid("id", request.id)

            await self.comment_repository.soft_delete(comment_id)

            return DeleteCommentResponse()
