"""Mock persistence providers for testing."""

from dishka import Scope, provide

from surmise.domain.repository import PostRepository, UserRepository
from surmise.persistence.database import DatabaseProbe, NullDatabaseProbe
from surmise.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from surmise.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Repositories are APP-scoped so that state survives across the requests
    of one test client; each test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_database_probe(self) -> DatabaseProbe:
        """Provide a probe that always succeeds."""
        return NullDatabaseProbe()

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_post_repository(self, user_repository: UserRepository) -> PostRepository:
        """Provide in-memory post repository resolving authors from users."""
        return InMemoryPostRepository(user_repository=user_repository)
