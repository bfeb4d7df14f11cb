"""PostgreSQL implementation of User repository."""

from typing import Optional

import logfire
from sqlalchemy import ColumnElement, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from surmise.domain.model import User
from surmise.domain.repository import UserRepository
from surmise.domain.value import UserId, Username
from surmise.persistence.database import rollback_on_error
from surmise.persistence.mappers import row_to_user, user_to_dict
from surmise.persistence.tables import users_table


class PostgresUserRepository(UserRepository):
    """Accounts stored in the ``users`` table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def _first(self, condition: ColumnElement[bool]) -> Optional[User]:
        result = await self.session.execute(select(users_table).where(condition))
        row = result.mappings().first()
        return row_to_user(dict(row)) if row is not None else None

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return await self._first(users_table.c.id == user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        # Usernames are stored exactly as registered
        return await self._first(users_table.c.username == username.root)

    async def save(self, user: User) -> User:
        """Insert the account, or refresh its username and hash if it exists."""
        values = user_to_dict(user)
        stmt = insert(users_table).values(**values)
        stmt = stmt.on_conflict_do_update(
            index_elements=[users_table.c.id],
            set_={
                "username": stmt.excluded.username,
                "password_hash": stmt.excluded.password_hash,
            },
        )

        with logfire.span("user_repository.save", user_id=str(user.id)):
            async with rollback_on_error(self.session):
                await self.session.execute(stmt)
                await self.session.flush()
        return user
