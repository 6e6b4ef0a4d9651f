"""Unit tests for PostgresCommentRepository error translation.

Only driver failures are exercised here; real queries run in the
integration suite.
"""

import pytest
from sqlalchemy.exc import OperationalError

from modcomment.domain.error import StorageError
from modcomment.persistence.repository import PostgresCommentRepository
from tests.factories import COMMENT_ID, MOD_ID, make_comment


class UnreachableSessionFactory:
    """Session factory whose transactions fail to open."""

    def __init__(self) -> None:
        self.error = OperationalError("SELECT 1", {}, ConnectionRefusedError())

    def begin(self):
        raise self.error


class TestPostgresCommentRepositoryErrors:
    """Driver errors become StorageError with the driver error as cause."""

    @pytest.mark.asyncio
    async def test_search_failure_is_translated(self):
        # Arrange
        factory = UnreachableSessionFactory()
        repo = PostgresCommentRepository(factory)

        # Act & Assert
        with pytest.raises(StorageError) as exc_info:
            await repo.search_by_parent(MOD_ID)

        assert exc_info.value.operation == "search_by_parent"
        assert exc_info.value.__cause__ is factory.error

    @pytest.mark.asyncio
    async def test_upsert_failure_is_translated(self):
        # Arrange
        factory = UnreachableSessionFactory()
        repo = PostgresCommentRepository(factory)

        # Act & Assert
        with pytest.raises(StorageError) as exc_info:
            await repo.upsert(make_comment())

        assert exc_info.value.operation == "upsert"
        assert exc_info.value.__cause__ is factory.error

    @pytest.mark.asyncio
    async def test_soft_delete_failure_is_translated(self):
        # Arrange
        factory = UnreachableSessionFactory()
        repo = PostgresCommentRepository(factory)

        # Act & Assert
        with pytest.raises(StorageError) as exc_info:
            await repo.soft_delete(COMMENT_ID)

        assert exc_info.value.operation == "soft_delete"
        assert isinstance(exc_info.value.__cause__, OperationalError)
