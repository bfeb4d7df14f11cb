"""Dictionary-backed user repository for tests."""

from typing import Optional

from surmise.domain.model.user import User
from surmise.domain.repository.user import UserRepository
from surmise.domain.value import UserId, Username


class InMemoryUserRepository(UserRepository):
    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        return self._users.get(user_id)

    async def find_by_username(self, username: Username) -> Optional[User]:
        return next(
            (user for user in self._users.values() if user.username == username),
            None,
        )

    async def save(self, user: User) -> User:
        self._users[user.id] = user
        return user
