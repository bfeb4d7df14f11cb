"""Unit tests for DeletePostUseCase."""

from uuid import uuid4

import pytest

from surmise.application.usecase.post import DeletePostRequest, DeletePostUseCase
from surmise.domain.error import NotAuthorizedError, NotFoundError
from surmise.domain.repository import PostRepository
from surmise.domain.value import UserId
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


@pytest.mark.asyncio
async def test_author_deletes_post(unit_env):
    """The author should be able to delete the post."""
    # Arrange
    use_case = await unit_env.get(DeletePostUseCase)
    post_repo = await unit_env.get(PostRepository)
    author_id = UserId(uuid4())
    post = await post_repo.save(make_post(author_id=author_id))

    # Act
    result = await use_case.execute(
        DeletePostRequest(post_id=str(post.id), user_id=author_id)
    )

    # Assert
    assert result.message == "Post deleted successfully"
    assert await post_repo.find_by_id(post.id) is None


@pytest.mark.asyncio
async def test_other_user_cannot_delete(unit_env):
    """Someone else's delete should fail and leave the post in place."""
    use_case = await unit_env.get(DeletePostUseCase)
    post_repo = await unit_env.get(PostRepository)
    post = await post_repo.save(make_post())

    with pytest.raises(NotAuthorizedError):
        await use_case.execute(
            DeletePostRequest(post_id=str(post.id), user_id=UserId(uuid4()))
        )

    assert await post_repo.find_by_id(post.id) is not None


@pytest.mark.asyncio
async def test_delete_unknown_post(unit_env):
    """Deleting an unknown post should raise NotFoundError."""
    use_case = await unit_env.get(DeletePostUseCase)

    with pytest.raises(NotFoundError):
        await use_case.execute(
            DeletePostRequest(post_id=str(uuid4()), user_id=UserId(uuid4()))
        )
