"""Post aggregate root."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from surmise.domain.error import ValidationError
from surmise.domain.model.common import DomainModel
from surmise.domain.value import PostId, UserId
from surmise.domain.value.common import ValueObject

REQUIRED_FIELDS_MESSAGE = "Title, summary, and content are required"


class Author(ValueObject):
    """Author reference of a post, resolved to a display name on reads."""

    id: UserId
    username: Optional[str] = None


class Post(DomainModel):
    """Blog post.

    The author is fixed at creation. ``created_at`` is set once and never
    changes; ``updated_at`` moves on every edit.
    """

    id: PostId
    title: str = Field(min_length=1)
    summary: str = Field(min_length=1)
    content: str = Field(min_length=1)  # Rich text (HTML)
    cover: Optional[str] = None  # e.g. "uploads/3f2a....png"
    author: Author
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def is_authored_by(self, user_id: UserId) -> bool:
        """Check ownership by identity value, not object identity."""
        return self.author.id == user_id


def require_post_fields(
    title: str | None, summary: str | None, content: str | None
) -> None:
    """Ensure every text field of a new post is present and non-empty.

    Raises:
        ValidationError: If any field is missing or empty
    """
    if not title or not summary or not content:
        raise ValidationError(REQUIRED_FIELDS_MESSAGE)
