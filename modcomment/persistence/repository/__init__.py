"""PostgreSQL repository implementations."""

from modcomment.persistence.repository.comment import PostgresCommentRepository

__all__ = [
    "PostgresCommentRepository",
]
