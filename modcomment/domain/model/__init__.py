"""Domain model entities."""

from modcomment.domain.model.comment import Comment
from modcomment.domain.model.validation import (
    TEXT_MAX_LENGTH,
    TEXT_MIN_LENGTH,
    Violation,
    collect_violations,
    is_uuid,
    is_uuid4,
    require_uuid,
    validate_comment,
)

__all__ = [
    "Comment",
    "TEXT_MAX_LENGTH",
    "TEXT_MIN_LENGTH",
    "Violation",
    "collect_violations",
    "is_uuid",
    "is_uuid4",
    "require_uuid",
    "validate_comment",
]
