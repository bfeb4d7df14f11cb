"""Domain value objects."""

from surmise.domain.value.identifiers import PostId, UserId
from surmise.domain.value.types import Theme, Username

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    # Types
    "Username",
    "Theme",
]
