"""Authentication routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Request, Response, status
from pydantic import BaseModel, Field

from surmise.application.usecase.auth import (
    AuthenticateUseCase,
    LoginRequest,
    LoginResponse,
    LoginUseCase,
    RegisterRequest,
    RegisterResponse,
    RegisterUseCase,
)
from surmise.application.usecase.post import MessageResponse
from surmise.config import Settings
from surmise.domain.error import BusinessRuleViolationError, InvalidCredentialsError
from surmise.domain.value import Username
from surmise.interface.api.credentials import require_identity

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)


class RegisterAPIRequest(BaseModel):
    """API request for creating an account."""

    username: Username
    password: str = Field(min_length=6, max_length=128)


class LoginAPIRequest(BaseModel):
    """API request for logging in."""

    username: str
    password: str


class ProfileResponse(BaseModel):
    """The caller's verified identity."""

    id: str
    username: str


@router.post(
    "/register", response_model=RegisterResponse, status_code=status.HTTP_201_CREATED
)
async def register(
    request: RegisterAPIRequest,
    register_use_case: FromDishka[RegisterUseCase],
) -> RegisterResponse:
    """Create an account.

    Raises:
        HTTPException: 400 if the username is taken
    """
    try:
        return await register_use_case.execute(
            RegisterRequest(username=request.username, password=request.password)
        )
    except BusinessRuleViolationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginAPIRequest,
    response: Response,
    login_use_case: FromDishka[LoginUseCase],
    settings: FromDishka[Settings],
) -> LoginResponse:
    """Log in with a username and password.

    The token is returned in the body and set as an httponly cookie. In
    production the cookie is ``Secure; SameSite=None`` so the front-end can
    send it cross-site.

    Raises:
        HTTPException: 400 on wrong credentials
    """
    try:
        result = await login_use_case.execute(
            LoginRequest(username=request.username, password=request.password)
        )
    except InvalidCredentialsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Wrong credentials"
        )

    auth = settings.auth
    response.set_cookie(
        key=auth.cookie_name,
        value=result.token,
        httponly=True,
        secure=auth.cookie_secure,
        samesite=auth.cookie_samesite,
        path="/",
        max_age=auth.jwt_expiry_days * 24 * 60 * 60,
    )
    return result


@router.post("/logout", response_model=MessageResponse)
async def logout(response: Response, settings: FromDishka[Settings]) -> MessageResponse:
    """Clear the token cookie."""
    auth = settings.auth
    response.delete_cookie(
        key=auth.cookie_name,
        path="/",
        secure=auth.cookie_secure,
        httponly=True,
        samesite=auth.cookie_samesite,
    )
    logfire.info("User logged out")
    return MessageResponse(message="Logged out")


@router.get("/profile", response_model=ProfileResponse)
async def profile(
    request: Request,
    authenticate_use_case: FromDishka[AuthenticateUseCase],
    settings: FromDishka[Settings],
) -> ProfileResponse:
    """Return the identity carried by the caller's token."""
    identity = await require_identity(request, authenticate_use_case, settings.auth)
    return ProfileResponse(id=str(identity.id), username=identity.username)
