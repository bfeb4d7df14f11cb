"""Register use case."""

from pydantic import BaseModel

from surmise.domain.service import UserService
from surmise.domain.value import Username


class RegisterRequest(BaseModel):
    """Register request."""

    username: Username
    password: str


class RegisterResponse(BaseModel):
    """Register response."""

    id: str
    username: str


class RegisterUseCase:
    """Use case for creating an account."""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def execute(self, request: RegisterRequest) -> RegisterResponse:
        """Create the account.

        Raises:
            BusinessRuleViolationError: If the username is taken
        """
        user = await self.user_service.register(request.username, request.password)
        return RegisterResponse(id=str(user.id), username=user.username.root)
