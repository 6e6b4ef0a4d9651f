"""Wire representation of comments.

The wire shapes are what callers send and receive over the RPC boundary.
Keys are camelCase on the wire and snake_case in Python.
"""

from datetime import datetime
from typing import Iterable

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from modcomment.domain.model import Comment


class WireModel(BaseModel):
    """Base for request/response bodies."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class WireComment(WireModel):
    """Comment as returned to callers."""

    id: str
    parent_id: str
    author_id: str
    text: str
    created_at: datetime | None = None


def comment_to_wire(comment: Comment) -> WireComment:
    """Map a domain comment to its wire shape."""
    return WireComment(
        id=comment.id,
        parent_id=comment.parent_id,
        author_id=comment.author_id,
        text=comment.text,
        created_at=comment.created_at,
    )


def comments_to_wire(comments: Iterable[Comment]) -> list[WireComment]:
    """Map comments in order. Empty input gives an empty list."""
    return [comment_to_wire(comment) for comment in comments]


def wire_to_comment(wire: WireComment) -> Comment:
    """Map a wire comment back to a domain comment.

    Only created_at survives; updated_at and deleted_at are not on the wire.
    """
    return Comment(
        id=wire.id,
        parent_id=wire.parent_id,
        author_id=wire.author_id,
        text=wire.text,
        created_at=wire.created_at,
    )
