"""Unit tests for PostService."""

from datetime import datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest

from surmise.domain.error import NotAuthorizedError, NotFoundError
from surmise.domain.repository import PostRepository
from surmise.domain.service import PostService
from surmise.domain.value import PostId, UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestListPosts:
    """Tests for list_posts method."""

    @pytest.mark.asyncio
    async def test_list_posts_returns_newest_first(self, unit_env):
        """Posts should be listed by creation time, newest first."""
        # Arrange
        post_service = await unit_env.get(PostService)
        base = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for day in (2, 0, 1):
            await post_service.save_post(
                make_post(title=f"Day {day}", created_at=base + timedelta(days=day))
            )

        # Act
        posts = await post_service.list_posts()

        # Assert
        assert [p.title for p in posts] == ["Day 2", "Day 1", "Day 0"]

    @pytest.mark.asyncio
    async def test_list_posts_breaks_ties_by_insertion_order(self, unit_env):
        """Posts created at the same instant should list the latest insert first."""
        # Arrange
        post_service = await unit_env.get(PostService)
        same_time = datetime(2024, 1, 1, tzinfo=timezone.utc)
        for index in range(3):
            await post_service.save_post(
                make_post(title=f"Post {index}", created_at=same_time)
            )

        # Act
        posts = await post_service.list_posts()

        # Assert
        assert [p.title for p in posts] == ["Post 2", "Post 1", "Post 0"]

    @pytest.mark.asyncio
    async def test_list_posts_empty(self, unit_env):
        """An empty store should list no posts."""
        post_service = await unit_env.get(PostService)

        assert await post_service.list_posts() == []


class TestGetPost:
    """Tests for get_post and get_owned_post methods."""

    @pytest.mark.asyncio
    async def test_get_post_raises_when_missing(self, unit_env):
        """Getting an unknown post should raise NotFoundError."""
        post_service = await unit_env.get(PostService)

        with pytest.raises(NotFoundError):
            await post_service.get_post(PostId(uuid4()))

    @pytest.mark.asyncio
    async def test_get_owned_post_compares_ids_by_value(self, unit_env):
        """Ownership should hold for an equal id built from a fresh UUID object."""
        # Arrange
        post_service = await unit_env.get(PostService)
        author_id = UserId(uuid4())
        post = await post_service.save_post(make_post(author_id=author_id))

        # Act
        same_author = UserId(UUID(str(author_id)))
        owned = await post_service.get_owned_post(post.id, same_author)

        # Assert
        assert owned.id == post.id

    @pytest.mark.asyncio
    async def test_get_owned_post_rejects_other_user(self, unit_env):
        """Another user should not be allowed to modify the post."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post())

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await post_service.get_owned_post(post.id, UserId(uuid4()))


class TestSaveAndDelete:
    """Tests for save_post and delete_post methods."""

    @pytest.mark.asyncio
    async def test_save_post_last_write_wins(self, unit_env):
        """Successive saves of the same post should keep the last one."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post = await post_service.save_post(make_post(title="First"))

        # Act
        for title in ("Second", "Third"):
            await post_service.save_post(post.model_copy(update={"title": title}))

        # Assert
        stored = await post_service.get_post(post.id)
        assert stored.title == "Third"
        assert stored.created_at == post.created_at

    @pytest.mark.asyncio
    async def test_delete_post_removes_record(self, unit_env):
        """Deleted posts should no longer be found."""
        # Arrange
        post_service = await unit_env.get(PostService)
        post_repo = await unit_env.get(PostRepository)
        post = await post_service.save_post(make_post())

        # Act
        await post_service.delete_post(post.id)

        # Assert
        assert await post_repo.find_by_id(post.id) is None
