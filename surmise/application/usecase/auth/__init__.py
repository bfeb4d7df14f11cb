"""Authentication use cases."""

from .authenticate import AuthenticateRequest, AuthenticateUseCase, Identity
from .login import LoginRequest, LoginResponse, LoginUseCase
from .register import RegisterRequest, RegisterResponse, RegisterUseCase

__all__ = [
    "AuthenticateRequest",
    "AuthenticateUseCase",
    "Identity",
    "LoginRequest",
    "LoginResponse",
    "LoginUseCase",
    "RegisterRequest",
    "RegisterResponse",
    "RegisterUseCase",
]
