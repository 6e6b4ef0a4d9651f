"""Field rules for the Comment entity.

Rules are declared as an ordered list and evaluated by ``collect_violations``.
The order decides which failure ``validate_comment`` reports: fields are
checked id, parent_id, author_id, text, and within a field only the first
failing rule counts.
"""

import re
from typing import Callable
from uuid import UUID

from modcomment.domain.error import ValidationError
from modcomment.domain.model.comment import Comment
from modcomment.domain.model.common import DomainModel

TEXT_MIN_LENGTH = 1
TEXT_MAX_LENGTH = 250

# Canonical lowercase UUID version 4
_UUID4_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$"
)


class Violation(DomainModel):
    """A single broken field rule."""

    field: str
    rule: str

    def to_error(self) -> ValidationError:
        return ValidationError(self.field, self.rule)


def is_uuid4(value: str) -> bool:
    """Check that value is a canonical UUID v4 string."""
    return bool(_UUID4_PATTERN.match(value))


def is_uuid(value: str) -> bool:
    """Check that value parses as a UUID of any version or spelling."""
    try:
        UUID(value)
    except (ValueError, TypeError, AttributeError):
        return False
    return True


def require_uuid(field: str, value: str) -> str:
    """Return value in canonical form or raise ValidationError.

    Used for identifier-only requests, which accept any UUID spelling.

    Raises:
        ValidationError: rule ``uuid`` when value does not parse
    """
    if not is_uuid(value):
        raise ValidationError(field, "uuid", f"{field} is not a valid UUID: {value!r}")
    return str(UUID(value))


def _present(value: str) -> bool:
    return value != ""


def _optional_uuid4(value: str) -> bool:
    return value == "" or is_uuid4(value)


# (field, rule, check) in evaluation order
_RULES: list[tuple[str, str, Callable[[str], bool]]] = [
    ("id", "uuid4", _optional_uuid4),
    ("parent_id", "required", _present),
    ("parent_id", "uuid4", is_uuid4),
    ("author_id", "required", _present),
    ("author_id", "uuid4", is_uuid4),
    ("text", "min", lambda v: len(v) >= TEXT_MIN_LENGTH),
    ("text", "max", lambda v: len(v) <= TEXT_MAX_LENGTH),
]


def collect_violations(comment: Comment) -> list[Violation]:
    """Evaluate every field rule against a comment.

    Args:
        comment: Comment to check

    Returns:
        Violations in rule order, at most one per field. Empty when valid.
    """
    violations: list[Violation] = []
    failed_fields: set[str] = set()

    for field, rule, check in _RULES:
        if field in failed_fields:
            continue
        if not check(getattr(comment, field)):
            failed_fields.add(field)
            violations.append(Violation(field=field, rule=rule))

    return violations


def validate_comment(comment: Comment) -> None:
    """Check a comment and raise on the first broken rule.

    Raises:
        ValidationError: naming the first failing field and rule
    """
    violations = collect_violations(comment)
    if violations:
        raise violations[0].to_error()
