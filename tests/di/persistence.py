"""Mock persistence providers for testing."""

from dishka import Scope, provide

from modcomment.domain.repository import CommentRepository
from modcomment.persistence.repository.inmemory import InMemoryCommentRepository
from modcomment.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using an in-memory repository.

    APP scope so state survives across requests within one container;
    every test builds its own container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()
