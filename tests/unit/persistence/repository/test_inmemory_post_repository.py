"""Unit tests for InMemoryPostRepository."""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from surmise.domain.model import User
from surmise.domain.value import UserId, Username
from surmise.persistence.repository.inmemory import (
    InMemoryPostRepository,
    InMemoryUserRepository,
)
from tests.conftest import make_post


@pytest.mark.asyncio
async def test_author_username_resolved_from_users():
    """Reads should show the author's current username, like the SQL join."""
    # Arrange
    users = InMemoryUserRepository()
    posts = InMemoryPostRepository(user_repository=users)
    author = await users.save(
        User(id=UserId(uuid4()), username=Username("alice"), password_hash="x")
    )
    post = await posts.save(make_post(author_id=author.id))

    # Act
    found = await posts.find_by_id(post.id)

    # Assert
    assert found.author.username == "alice"


@pytest.mark.asyncio
async def test_save_keeps_creation_time_and_author():
    """Updates must not move created_at or change the author."""
    posts = InMemoryPostRepository()
    original = await posts.save(
        make_post(created_at=datetime(2024, 1, 1, tzinfo=timezone.utc))
    )

    await posts.save(
        original.model_copy(
            update={
                "title": "Changed",
                "created_at": datetime(2030, 1, 1, tzinfo=timezone.utc),
                "author": make_post().author,
            }
        )
    )

    stored = await posts.find_by_id(original.id)
    assert stored.title == "Changed"
    assert stored.created_at == original.created_at
    assert stored.author == original.author
