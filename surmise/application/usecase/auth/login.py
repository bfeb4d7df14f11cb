"""Login use case."""

import logfire
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from surmise.domain.error import InvalidCredentialsError
from surmise.domain.service import JWTService, UserService
from surmise.domain.value import Username


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class LoginResponse(BaseModel):
    """Login response."""

    id: str
    username: str
    token: str


class LoginUseCase:
    """Use case for username/password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> LoginResponse:
        """Execute login flow.

        Steps:
        1. Check the username/password pair
        2. Issue a JWT carrying the user's id and username

        Args:
            request: Login request

        Returns:
            The user's id and username with a fresh token

        Raises:
            InvalidCredentialsError: If the credentials don't match
        """
        with logfire.span("login.execute", username=request.username):
            # A malformed username can't belong to any account
            try:
                username = Username(request.username)
            except PydanticValidationError:
                raise InvalidCredentialsError(request.username)

            user = await self.user_service.authenticate(username, request.password)
            token = self.jwt_service.create_token(str(user.id), user.username.root)

            logfire.info("User logged in", user_id=str(user.id))
            return LoginResponse(
                id=str(user.id), username=user.username.root, token=token
            )
