"""Comment service routes.

The four unary RPC operations, each exposed as a POST endpoint under the
service name. Errors are translated by the handlers in
``modcomment.interface.error``.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from modcomment.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentsByParentRequest,
    GetCommentsByParentResponse,
    GetCommentsByParentUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from modcomment.interface.error import ErrorResponse

SERVICE_NAME = "comment.CommentService"

router = APIRouter(
    prefix=f"/{SERVICE_NAME}",
    tags=["comments"],
    route_class=DishkaRoute,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.post("/GetCommentsByParent", response_model=GetCommentsByParentResponse)
async def get_comments_by_parent(
    request: GetCommentsByParentRequest,
    use_case: FromDishka[GetCommentsByParentUseCase],
) -> GetCommentsByParentResponse:
    """List the live comments of a mod.

    Args:
        request: Mod ID
        use_case: Get comments use case from DI

    Returns:
        Comments of the mod, possibly empty
    """
    return await use_case.execute(request)


@router.post("/CreateComment", response_model=CreateCommentResponse)
async def create_comment(
    request: CreateCommentRequest,
    use_case: FromDishka[CreateCommentUseCase],
) -> CreateCommentResponse:
    """Create a comment on a mod and return its generated ID."""
    return await use_case.execute(request)


@router.post("/UpdateComment", response_model=UpdateCommentResponse)
async def update_comment(
    request: UpdateCommentRequest,
    use_case: FromDishka[UpdateCommentUseCase],
) -> UpdateCommentResponse:
    """Overwrite a comment's mod, author and text."""
    return await use_case.execute(request)


@router.post("/DeleteComment", response_model=DeleteCommentResponse)
async def delete_comment(
    request: DeleteCommentRequest,
    use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Soft delete a comment."""
    return await use_case.execute(request)
