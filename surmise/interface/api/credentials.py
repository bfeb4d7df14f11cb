"""Token extraction and caller identity.

Tokens are looked up in an ordered list of sources; the first source that
yields a non-empty token wins. Browsers send the ``token`` cookie set at
login, other clients send ``Authorization: Bearer <token>``.
"""

import logfire
from fastapi import HTTPException, Request, status

from surmise.application.usecase.auth import (
    AuthenticateRequest,
    AuthenticateUseCase,
    Identity,
)
from surmise.config import AuthSettings
from surmise.domain.error import InvalidTokenError, UnauthenticatedError


class TokenSource:
    """Somewhere a request may carry its token."""

    def extract(self, request: Request) -> str | None:
        raise NotImplementedError


class CookieTokenSource(TokenSource):
    """Token stored in a cookie."""

    def __init__(self, cookie_name: str = "token") -> None:
        self.cookie_name = cookie_name

    def extract(self, request: Request) -> str | None:
        return request.cookies.get(self.cookie_name) or None


class BearerHeaderTokenSource(TokenSource):
    """Token in an ``Authorization: Bearer`` header."""

    def extract(self, request: Request) -> str | None:
        header = request.headers.get("authorization")
        if not header:
            return None
        scheme, _, token = header.partition(" ")
        if scheme.lower() != "bearer":
            return None
        return token.strip() or None


def token_sources(auth_settings: AuthSettings) -> list[TokenSource]:
    """Token sources in lookup order."""
    return [CookieTokenSource(auth_settings.cookie_name), BearerHeaderTokenSource()]


def extract_token(request: Request, sources: list[TokenSource]) -> str | None:
    """Return the first token found, or None."""
    for source in sources:
        token = source.extract(request)
        if token:
            return token
    return None


async def require_identity(
    request: Request,
    authenticate_use_case: AuthenticateUseCase,
    auth_settings: AuthSettings,
) -> Identity:
    """Verify the caller or abort the request with a 401.

    Args:
        request: Incoming request
        authenticate_use_case: Authenticate use case from DI
        auth_settings: Authentication settings

    Returns:
        The verified identity

    Raises:
        HTTPException: 401 "Not authenticated" without a token, 401
            "Invalid token" when the token fails verification
    """
    token = extract_token(request, token_sources(auth_settings))
    try:
        return await authenticate_use_case.execute(AuthenticateRequest(token=token))
    except UnauthenticatedError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
        )
    except InvalidTokenError as e:
        logfire.debug("Rejected token", path=request.url.path, reason=e.reason)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
        )
