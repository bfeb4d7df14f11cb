"""PostgreSQL providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from surmise.config import Settings
from surmise.domain.repository import PostRepository, UserRepository
from surmise.persistence.database import (
    DatabaseProbe,
    EngineDatabaseProbe,
    create_engine,
    create_session_factory,
)
from surmise.persistence.repository import (
    PostgresPostRepository,
    PostgresUserRepository,
)
from surmise.util.di.base import ProviderBase
from surmise.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Repositories backed by one AsyncSession per request."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    async def engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        yield engine
        # Runs when the app container closes at shutdown
        await engine.dispose()

    @provide(scope=Scope.APP)
    def database_probe(self, engine: AsyncEngine) -> DatabaseProbe:
        return EngineDatabaseProbe(engine)

    @provide(scope=Scope.APP)
    def session_factory(self, engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Open a session for the request.

        Work is committed when the request scope closes cleanly. If the
        handler raised, everything it wrote is rolled back.
        """
        async with session_factory() as session:
            try:
                yield session
            except Exception as e:
                await session.rollback()
                logfire.warn("Request rolled back", error_type=type(e).__name__)
                raise
            else:
                await session.commit()

    @provide(scope=Scope.REQUEST)
    def user_repository(self, session: AsyncSession) -> UserRepository:
        return PostgresUserRepository(session)

    @provide(scope=Scope.REQUEST)
    def post_repository(self, session: AsyncSession) -> PostRepository:
        return PostgresPostRepository(session)
