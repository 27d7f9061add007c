"""Mock persistence providers for testing."""

from dishka import Scope, provide

from scribe.domain.repository import PostRepository, UserRepository
from scribe.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from scribe.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so data written in one request is visible to the next
    (register, then log in). Every test builds its own container, which keeps
    tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post repository."""
        return InMemoryPostRepository()
