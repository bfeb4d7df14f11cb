"""User domain service."""

from uuid import uuid4

import logfire
from werkzeug.security import check_password_hash, generate_password_hash

from surmise.domain.error import (
    BusinessRuleViolationError,
    InvalidCredentialsError,
    NotFoundError,
)
from surmise.domain.model import User
from surmise.domain.repository import UserRepository
from surmise.domain.value import UserId, Username

from .base import Service


class UserService(Service):
    """Domain service for user operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def register(self, username: Username, password: str) -> User:
        """Create a user with a hashed password.

        Args:
            username: Requested username
            password: Plain-text password

        Returns:
            The created user

        Raises:
            BusinessRuleViolationError: If the username is taken
        """
        with logfire.span("user_service.register", username=username.root):
            if await self.user_repository.find_by_username(username):
                logfire.warn("Username already taken", username=username.root)
                raise BusinessRuleViolationError("Username already taken")

            user = User(
                id=UserId(uuid4()),
                username=username,
                password_hash=generate_password_hash(password),
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id))
            return saved

    async def authenticate(self, username: Username, password: str) -> User:
        """Check a username/password pair.

        Args:
            username: Username
            password: Plain-text password

        Returns:
            The matching user

        Raises:
            InvalidCredentialsError: If the user is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate", username=username.root):
            user = await self.user_repository.find_by_username(username)
            if user is None or not check_password_hash(user.password_hash, password):
                logfire.warn("Login rejected", username=username.root)
                raise InvalidCredentialsError(username.root)
            return user
