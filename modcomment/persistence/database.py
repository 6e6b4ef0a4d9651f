"""Connection pool and sessions for the comments database."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from modcomment.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine whose pool is shared by all requests.

    Pool size and overflow come from DATABASE__POOL_SIZE and
    DATABASE__MAX_OVERFLOW. SQL is echoed when DEBUG is set.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Rows are mapped to immutable models before commit, nothing to refresh
    return async_sessionmaker(engine, expire_on_commit=False)
