"""Signing and checking of session tokens.

Tokens are HS256 JWTs carrying the user's id and username. Anything that
fails verification surfaces as a single JWTError.
"""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from surmise.config import AuthSettings


class JWTError(Exception):
    pass


class TokenPayload(BaseModel):
    id: str
    username: str
    exp: datetime


def create_token(user_id: str, username: str, settings: AuthSettings) -> str:
    """Sign a token valid for ``settings.jwt_expiry_days`` days."""
    issued_at = datetime.now(timezone.utc)
    claims = {
        "id": user_id,
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check the signature and expiry of ``token`` and return its claims.

    Raises:
        JWTError: On a bad signature, an expired or malformed token, or
            claims without the user identity
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Token payload is missing the user identity") from e
