"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from surmise.domain.model.user import User
from surmise.domain.value import UserId, Username


class UserRepository(ABC):
    """Storage for registered accounts.

    Usernames are unique across accounts; the storage layer enforces it.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Look an account up by id, returning None when it does not exist."""

    @abstractmethod
    async def find_by_username(self, username: Username) -> Optional[User]:
        """Look an account up by its exact username.

        Used by login and by registration's duplicate check.
        """

    @abstractmethod
    async def save(self, user: User) -> User:
        """Persist a new account or overwrite an existing one by id."""
