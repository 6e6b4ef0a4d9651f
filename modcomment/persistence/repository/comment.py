"""PostgreSQL implementation of Comment repository."""

from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import AsyncIterator, List

import logfire
from sqlalchemy import insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from modcomment.domain.error import StorageError
from modcomment.domain.model import Comment
from modcomment.domain.repository import CommentRepository
from modcomment.persistence.mappers import comment_to_dict, row_to_comment
from modcomment.persistence.tables import comments_table, metadata


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Holds only the session factory, which wraps the engine's connection pool.
    Every operation runs as one statement in its own transaction, so a
    single instance is shared by all concurrent requests.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize repository with a session factory.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self.session_factory = session_factory

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Open a session in a transaction, translating driver failures.

        Commits on success, rolls back on error or cancellation.
        """
        try:
            async with self.session_factory.begin() as session:
                yield session
        except (SQLAlchemyError, OSError) as e:
            logfire.error(
                "Comment storage operation failed",
                operation=operation,
                error=str(e),
                error_type=type(e).__name__,
            )
            raise StorageError(operation, str(e)) from e

    async def search_by_parent(self, parent_id: str) -> List[Comment]:
        """Find all live comments of a mod."""
        stmt = (
            select(comments_table)
            .where(comments_table.c.parent_id == parent_id)
            .where(comments_table.c.deleted_at.is_(None))
            .order_by(comments_table.c.created_at, comments_table.c.id)
        )

        async with self._transaction("search_by_parent") as session:
            result = await session.execute(stmt)
            rows = result.fetchall()

        return [row_to_comment(row._asdict()) for row in rows]

    async def upsert(self, comment: Comment) -> Comment:
        """Insert a new comment or overwrite a live one."""
        now = datetime.now(timezone.utc)
        values = comment_to_dict(comment)

        if comment.is_new:
            # Insert - id is generated by the database
            stmt = (
                insert(comments_table)
                .values(**values, created_at=now, updated_at=now)
                .returning(comments_table)
            )
        else:
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .where(comments_table.c.deleted_at.is_(None))
                .values(**values, updated_at=now)
                .returning(comments_table)
            )

        async with self._transaction("upsert") as session:
            result = await session.execute(stmt)
            row = result.fetchone()

        if row is None:
            # Update matched no live row
            logfire.debug("Comment upsert matched no row", comment_id=comment.id)
            return comment

        return row_to_comment(row._asdict())

    async def soft_delete(self, comment_id: str) -> None:
        """Set deleted_at on a live comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.deleted_at.is_(None))
            .values(deleted_at=datetime.now(timezone.utc))
        )

        async with self._transaction("soft_delete") as session:
            result = await session.execute(stmt)
            matched = result.rowcount

        if matched == 0:
            logfire.debug("Comment soft delete matched no row", comment_id=comment_id)

    async def ensure_schema(self) -> None:
        """Create the comments table and indexes if missing."""
        async with self._transaction("ensure_schema") as session:
            connection = await session.connection()
            await connection.run_sync(metadata.create_all)

        logfire.info("Comment schema ensured", table=comments_table.name)
