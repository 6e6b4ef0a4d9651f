"""Create comment use case."""

from modcomment.application.usecase.base import BaseUseCase
from modcomment.application.usecase.comment.wire import WireModel
from modcomment.domain.model import Comment, validate_comment
from modcomment.domain.repository import CommentRepository


class CreateCommentRequest(WireModel):
    """Create comment request."""

    parent_id: str = ""  # Mod UUID
    author_id: str = ""  # User UUID
    text: str = ""


class CreateCommentResponse(WireModel):
    """Create comment response."""

    id: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for adding a comment to a mod."""

    operation = "CreateComment"

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize create comment use case.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        The id is never taken from the caller; the store generates it.

        Args:
            request: Create comment request

        Returns:
            The generated comment ID

        Raises:
            ValidationError: If a field breaks its rule
            StorageError: If the insert fails
        """
        with self.observe(
            parent_id=request.parent_id, author_id=request.author_id
        ) as result:
            comment = Comment(
                id="",
                parent_id=request.parent_id,
                author_id=request.author_id,
                text=request.text,
            )
            validate_comment(comment)

            saved = await self.comment_repository.upsert(comment)
            result["comment_id"] = saved.id

            return CreateCommentResponse(id=saved.id)
