"""Domain services."""

from .base import Service
from .jwt_service import JWTService
from .post_service import PostService
from .storage import CoverStorage, StagedCover
from .user_service import UserService

__all__ = [
    "CoverStorage",
    "JWTService",
    "PostService",
    "Service",
    "StagedCover",
    "UserService",
]
