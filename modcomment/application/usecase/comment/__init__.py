"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
)
from .get_comments import (
    GetCommentsByParentRequest,
    GetCommentsByParentResponse,
    GetCommentsByParentUseCase,
)
from .update_comment import (
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from .wire import (
    WireComment,
    comment_to_wire,
    comments_to_wire,
    wire_to_comment,
)

__all__ = [
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentResponse",
    "DeleteCommentUseCase",
    "GetCommentsByParentRequest",
    "GetCommentsByParentResponse",
    "GetCommentsByParentUseCase",
    "UpdateCommentRequest",
    "UpdateCommentResponse",
    "UpdateCommentUseCase",
    "WireComment",
    "comment_to_wire",
    "comments_to_wire",
    "wire_to_comment",
]
