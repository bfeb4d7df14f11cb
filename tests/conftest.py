"""Test configuration and fixtures."""

import os
import tempfile
from datetime import datetime, timezone
from uuid import uuid4

import logfire

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret")
os.environ.setdefault("UPLOADS__DIRECTORY", tempfile.mkdtemp(prefix="surmise-uploads-"))

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

from surmise.domain.model.post import Author, Post  # noqa: E402
from surmise.domain.value import PostId, UserId  # noqa: E402


def make_post(
    author_id: UserId | None = None,
    title: str = "Test Post",
    created_at: datetime | None = None,
    **fields,
) -> Post:
    """Build a post with sensible defaults for tests."""
    now = created_at or datetime.now(timezone.utc)
    return Post(
        id=fields.pop("id", None) or PostId(uuid4()),
        title=title,
        summary=fields.pop("summary", "A short summary"),
        content=fields.pop("content", "<p>Body</p>"),
        cover=fields.pop("cover", None),
        author=Author(
            id=author_id or UserId(uuid4()), username=fields.pop("username", None)
        ),
        created_at=now,
        updated_at=fields.pop("updated_at", now),
    )
