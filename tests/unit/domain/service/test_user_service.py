"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from surmise.domain.error import (
    BusinessRuleViolationError,
    InvalidCredentialsError,
    NotFoundError,
)
from surmise.domain.service import UserService
from surmise.domain.value import UserId, Username
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRegister:
    """Tests for register method."""

    @pytest.mark.asyncio
    async def test_register_hashes_password(self, unit_env):
        """The stored user should carry a hash, never the password."""
        # Arrange
        user_service = await unit_env.get(UserService)

        # Act
        user = await user_service.register(Username("alice"), "s3cret-pass")

        # Assert
        assert user.password_hash != "s3cret-pass"
        assert (await user_service.get_by_id(user.id)).username == Username("alice")

    @pytest.mark.asyncio
    async def test_register_rejects_taken_username(self, unit_env):
        """A second account with the same username should be refused."""
        # Arrange
        user_service = await unit_env.get(UserService)
        await user_service.register(Username("alice"), "s3cret-pass")

        # Act & Assert
        with pytest.raises(BusinessRuleViolationError, match="Username already taken"):
            await user_service.register(Username("alice"), "other-pass")


class TestAuthenticate:
    """Tests for authenticate method."""

    @pytest.mark.asyncio
    async def test_authenticate_with_correct_password(self, unit_env):
        """The right password should return the user."""
        # Arrange
        user_service = await unit_env.get(UserService)
        registered = await user_service.register(Username("alice"), "s3cret-pass")

        # Act
        user = await user_service.authenticate(Username("alice"), "s3cret-pass")

        # Assert
        assert user.id == registered.id

    @pytest.mark.asyncio
    async def test_authenticate_with_wrong_password(self, unit_env):
        """A wrong password should raise InvalidCredentialsError."""
        user_service = await unit_env.get(UserService)
        await user_service.register(Username("alice"), "s3cret-pass")

        with pytest.raises(InvalidCredentialsError):
            await user_service.authenticate(Username("alice"), "wrong-pass")

    @pytest.mark.asyncio
    async def test_authenticate_unknown_user(self, unit_env):
        """An unknown username should raise InvalidCredentialsError."""
        user_service = await unit_env.get(UserService)

        with pytest.raises(InvalidCredentialsError):
            await user_service.authenticate(Username("nobody"), "whatever")


@pytest.mark.asyncio
async def test_get_by_id_raises_when_missing(unit_env):
    """Looking up an unknown id should raise NotFoundError."""
    user_service = await unit_env.get(UserService)

    with pytest.raises(NotFoundError):
        await user_service.get_by_id(UserId(uuid4()))
