"""Update comment use case."""

from modcomment.application.usecase.base import BaseUseCase
from modcomment.application.usecase.comment.wire import WireModel
from modcomment.domain.model import Comment, validate_comment
from modcomment.domain.repository import CommentRepository


class UpdateCommentRequest(WireModel):
    """Update comment request."""

    id: str = ""  # Comment UUID
    parent_id: str = ""  # Mod UUID
    author_id: str = ""  # User UUID
    text: str = ""


class UpdateCommentResponse(WireModel):
    """Update comment response (empty acknowledgment)."""

    pass


class UpdateCommentUseCase(BaseUseCase):
    """Use case for overwriting a comment."""

    operation = "UpdateComment"

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize update comment use case.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Updating a comment that does not exist or was deleted succeeds
        without changing anything.

        Args:
            request: Update comment request with all fields

        Returns:
            Empty acknowledgment

        Raises:
            ValidationError: If a field breaks its rule
            StorageError: If the update fails
        """
        with self.observe(
            comment_id=request.id,
            parent_id=request.parent_id,
            author_id=request.author_id,
        ):
            comment = Comment(
                id=request.id,
                parent_id=request.parent_id,
                author_id=request.author_id,
                text=request.text,
            )
            validate_comment(comment)

            await self.comment_repository.upsert(comment)

            return UpdateCommentResponse()
