"""PostgreSQL repository implementations."""

from surmise.persistence.repository.post import PostgresPostRepository
from surmise.persistence.repository.user import PostgresUserRepository

__all__ = [
    "PostgresPostRepository",
    "PostgresUserRepository",
]
