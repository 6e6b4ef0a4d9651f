"""Mappers between database rows and domain models."""

from typing import Any, Dict

from modcomment.domain.model import Comment


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=str(row["id"]),
        parent_id=str(row["parent_id"]),
        author_id=str(row["author_id"]),
        text=row["text"],
        created_at=row.get("created_at"),
        updated_at=row.get("updated_at"),
        deleted_at=row.get("deleted_at"),
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert the caller-owned fields of a comment to a database dict.

    The id and timestamps are left out: the repository sets them.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump(include={"parent_id", "author_id", "text"})
