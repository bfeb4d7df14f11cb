"""Token issuing and verification service."""

import logfire

from surmise.config import AuthSettings
from surmise.util import jwt

from .base import Service


class JWTService(Service):
    """Issues session tokens at login and checks them on each request."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, username: str) -> str:
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return jwt.create_token(user_id, username, self.auth_settings)

    def verify_token(self, token: str) -> jwt.TokenPayload:
        """Decode ``token``, raising JWTError when it cannot be trusted."""
        with logfire.span("jwt_service.verify_token"):
            payload = jwt.verify_token(token, self.auth_settings)
            logfire.debug("Token accepted", user_id=payload.id)
            return payload
