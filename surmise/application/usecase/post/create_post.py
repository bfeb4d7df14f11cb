"""Create post use case."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import BaseModel, ConfigDict

from surmise.application.usecase.base import BaseUseCase
from surmise.domain.model.post import Author, Post, require_post_fields
from surmise.domain.service import CoverStorage, PostService, StagedCover
from surmise.domain.value import PostId, UserId

from .common import PostResponse


class CreatePostRequest(BaseModel):
    """Create post request."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    author_id: UserId  # Verified identity
    author_username: str
    title: str | None = None
    summary: str | None = None
    content: str | None = None
    cover: StagedCover | None = None


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(self, post_service: PostService, cover_storage: CoverStorage) -> None:
        """Initialize create post use case.

        Args:
            post_service: Post domain service
            cover_storage: Storage holding uploaded covers
        """
        self.post_service = post_service
        self.cover_storage = cover_storage

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Steps:
        1. Check that title, summary and content are all present
        2. Commit the staged cover, if any
        3. Create and save the Post entity

        A staged cover is discarded when validation fails, and a committed one
        is removed again when the save fails.

        Args:
            request: Create post request

        Returns:
            The created post

        Raises:
            ValidationError: If a required field is missing or empty
        """
        with logfire.span(
            "create_post.execute",
            author_id=str(request.author_id),
            has_cover=request.cover is not None,
        ):
            cover_path = None
            try:
                require_post_fields(request.title, request.summary, request.content)

                if request.cover is not None:
                    cover_path = await self.cover_storage.commit(request.cover)

                now = datetime.now(timezone.utc)
                post = Post(
                    id=PostId(uuid4()),
                    title=request.title,
                    summary=request.summary,
                    content=request.content,
                    cover=cover_path,
                    author=Author(
                        id=request.author_id, username=request.author_username
                    ),
                    created_at=now,
                    updated_at=now,
                )
                saved = await self.post_service.save_post(post)
            except Exception:
                if cover_path is not None:
                    await self.cover_storage.remove(cover_path)
                elif request.cover is not None:
                    await self.cover_storage.discard(request.cover)
                raise

            logfire.info("Post created successfully", post_id=str(saved.id))
            return PostResponse.from_post(saved)
