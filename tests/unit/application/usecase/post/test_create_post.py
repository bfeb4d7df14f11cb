"""Unit tests for CreatePostUseCase."""

from uuid import UUID, uuid4

import pytest

from surmise.application.usecase.post import CreatePostRequest, CreatePostUseCase
from surmise.domain.error import ValidationError
from surmise.domain.repository import PostRepository
from surmise.domain.service import CoverStorage
from surmise.domain.value import PostId, UserId
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _request(author_id: UserId, **fields) -> CreatePostRequest:
    defaults = {"title": "Hello", "summary": "First post", "content": "<p>Hi</p>"}
    defaults.update(fields)
    return CreatePostRequest(author_id=author_id, author_username="alice", **defaults)


class TestCreatePostUseCase:
    """Tests for CreatePostUseCase."""

    @pytest.mark.asyncio
    async def test_create_post_round_trip(self, unit_env):
        """A created post should read back with the same fields."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())

        # Act
        created = await use_case.execute(_request(author_id))

        # Assert
        stored = await post_repo.find_by_id(PostId(UUID(created.id)))
        assert stored is not None
        assert stored.title == "Hello"
        assert stored.summary == "First post"
        assert stored.content == "<p>Hi</p>"
        assert stored.author.id == author_id
        assert created.created_at is not None
        assert created.created_at == created.updated_at
        assert created.cover is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("missing", ["title", "summary", "content"])
    async def test_missing_field_persists_nothing(self, unit_env, missing):
        """A missing field should fail validation and store nothing."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)

        # Act & Assert
        with pytest.raises(ValidationError):
            await use_case.execute(_request(UserId(uuid4()), **{missing: ""}))

        assert await post_repo.find_all() == []

    @pytest.mark.asyncio
    async def test_cover_committed_with_extension(self, unit_env):
        """The cover should be committed under a name keeping its extension."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        storage = await unit_env.get(CoverStorage)
        staged = await storage.stage("photo.png", b"\x89PNG")

        # Act
        created = await use_case.execute(_request(UserId(uuid4()), cover=staged))

        # Assert
        assert created.cover == f"uploads/{staged.key}.png"
        assert storage.files[created.cover] == b"\x89PNG"
        assert storage.staged == {}

    @pytest.mark.asyncio
    async def test_staged_cover_discarded_on_validation_failure(self, unit_env):
        """A rejected post should not leave its cover behind."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        storage = await unit_env.get(CoverStorage)
        staged = await storage.stage("photo.jpg", b"jpeg")

        # Act
        with pytest.raises(ValidationError):
            await use_case.execute(
                _request(UserId(uuid4()), title=None, cover=staged)
            )

        # Assert
        assert storage.staged == {}
        assert storage.files == {}

    @pytest.mark.asyncio
    async def test_committed_cover_removed_when_save_fails(self, unit_env):
        """A cover committed before a failing save should be removed again."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        storage = await unit_env.get(CoverStorage)
        staged = await storage.stage("photo.gif", b"gif")

        async def failing_save(post):
            raise RuntimeError("database down")

        use_case.post_service.save_post = failing_save

        # Act
        with pytest.raises(RuntimeError):
            await use_case.execute(_request(UserId(uuid4()), cover=staged))

        # Assert
        assert storage.files == {}

    @pytest.mark.asyncio
    async def test_n_creations_list_newest_first(self, unit_env):
        """N created posts should all be listed, newest first."""
        # Arrange
        use_case = await unit_env.get(CreatePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        author_id = UserId(uuid4())

        # Act
        for index in range(5):
            await use_case.execute(_request(author_id, title=f"Post {index}"))

        # Assert
        posts = await post_repo.find_all()
        assert [p.title for p in posts] == [f"Post {i}" for i in reversed(range(5))]
