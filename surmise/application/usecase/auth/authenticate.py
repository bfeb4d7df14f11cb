"""Authenticate use case.

Turns the token found on a request into a verified identity. Verification
only needs the token and the shared secret; the user table is not consulted.
"""

from uuid import UUID

import logfire
from pydantic import BaseModel

from surmise.domain.error import InvalidTokenError, UnauthenticatedError
from surmise.domain.service import JWTService
from surmise.domain.value import UserId
from surmise.util.jwt import JWTError


class AuthenticateRequest(BaseModel):
    """Authenticate request."""

    token: str | None  # First token found by the token sources, if any


class Identity(BaseModel):
    """Verified identity of the caller."""

    id: UserId
    username: str


class AuthenticateUseCase:
    """Use case for verifying the caller's token."""

    def __init__(self, jwt_service: JWTService) -> None:
        """Initialize authenticate use case.

        Args:
            jwt_service: JWT token domain service
        """
        self.jwt_service = jwt_service

    async def execute(self, request: AuthenticateRequest) -> Identity:
        """Execute authentication.

        Args:
            request: Request carrying the extracted token

        Returns:
            The verified identity

        Raises:
            UnauthenticatedError: If no token was supplied
            InvalidTokenError: If the token is malformed, expired, badly signed
                or does not carry a valid user id
        """
        if not request.token:
            logfire.warn("auth.token_missing")
            raise UnauthenticatedError()

        try:
            payload = self.jwt_service.verify_token(request.token)
            user_id = UserId(UUID(payload.id))
        except JWTError as e:
            logfire.warn("auth.token_rejected", reason=str(e))
            raise InvalidTokenError(str(e)) from e
        except ValueError as e:
            logfire.warn("auth.token_rejected", reason="Malformed user id")
            raise InvalidTokenError("Malformed user id") from e

        return Identity(id=user_id, username=payload.username)
