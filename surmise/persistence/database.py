"""Async engine, sessions and the startup connectivity probe."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from surmise.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    # Repositories return domain models, so loaded rows never need refreshing
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@asynccontextmanager
async def rollback_on_error(session: AsyncSession) -> AsyncIterator[None]:
    """Roll the session back when a statement in the block fails.

    Routes turn repository failures into HTTP errors, so the request scope
    closes normally and commits; the session must already be clean by then.
    """
    try:
        yield
    except SQLAlchemyError:
        await session.rollback()
        raise


class DatabaseProbe:
    """Startup connectivity check for the database."""

    async def check(self) -> None:
        """Verify the database answers.

        Raises:
            Exception: Whatever the driver raises when it cannot connect
        """
        raise NotImplementedError


class EngineDatabaseProbe(DatabaseProbe):
    """Probe that runs ``SELECT 1`` on the engine."""

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine

    async def check(self) -> None:
        async with self.engine.connect() as connection:
            await connection.execute(text("SELECT 1"))


class NullDatabaseProbe(DatabaseProbe):
    """Probe for in-memory persistence; always succeeds."""

    async def check(self) -> None:
        return None
