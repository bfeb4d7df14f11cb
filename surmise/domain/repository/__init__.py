"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from surmise.domain.repository.post import PostRepository
from surmise.domain.repository.user import UserRepository

__all__ = [
    "PostRepository",
    "UserRepository",
]
