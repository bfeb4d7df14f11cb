"""User aggregate root.

Users own posts and authenticate with a username and password.
"""

from datetime import datetime, timezone

from pydantic import Field

from surmise.domain.model.common import DomainModel
from surmise.domain.value import UserId, Username


class User(DomainModel):
    """User aggregate root."""

    id: UserId
    username: Username
    password_hash: str = Field(repr=False)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
