"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from modcomment.config import Settings
from modcomment.domain.repository import CommentRepository
from modcomment.persistence.database import create_engine, create_session_factory
from modcomment.persistence.repository import PostgresCommentRepository
from modcomment.util.di.base import ProviderBase
from modcomment.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL.

    Everything is APP-scoped: the engine's pool is shared by all requests
    and the repository opens a transaction per operation.
    """

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.APP)
    def get_comment_repository(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session_factory)
