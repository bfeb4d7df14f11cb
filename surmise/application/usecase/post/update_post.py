"""Update post use case."""

from datetime import datetime, timezone

import logfire
from pydantic import BaseModel, ConfigDict

from surmise.application.usecase.base import BaseUseCase
from surmise.domain.error import ValidationError
from surmise.domain.model.post import REQUIRED_FIELDS_MESSAGE
from surmise.domain.service import CoverStorage, PostService, StagedCover
from surmise.domain.value import UserId

from .common import MessageResponse, parse_post_id


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None keep their stored value.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    post_id: str
    user_id: UserId
    title: str | None = None
    summary: str | None = None
    content: str | None = None
    cover: StagedCover | None = None


class UpdatePostUseCase(BaseUseCase):
    """Use case for editing a post."""

    def __init__(self, post_service: PostService, cover_storage: CoverStorage) -> None:
        """Initialize update post use case.

        Args:
            post_service: Post domain service
            cover_storage: Storage holding uploaded covers
        """
        self.post_service = post_service
        self.cover_storage = cover_storage

    async def execute(self, request: UpdatePostRequest) -> MessageResponse:
        """Execute update post flow.

        Steps:
        1. Load the post and check that the user is its author
        2. Reject supplied fields that are empty
        3. Commit the new cover, if any, and save the merged post

        Args:
            request: Update post request

        Returns:
            Confirmation message

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
            ValidationError: If a supplied field is empty
        """
        with logfire.span(
            "update_post.execute",
            post_id=request.post_id,
            user_id=str(request.user_id),
        ):
            cover_path = None
            try:
                post = await self.post_service.get_owned_post(
                    parse_post_id(request.post_id), request.user_id
                )

                changes = {
                    name: value
                    for name, value in (
                        ("title", request.title),
                        ("summary", request.summary),
                        ("content", request.content),
                    )
                    if value is not None
                }
                if any(value == "" for value in changes.values()):
                    raise ValidationError(REQUIRED_FIELDS_MESSAGE)

                if request.cover is not None:
                    cover_path = await self.cover_storage.commit(request.cover)
                    changes["cover"] = cover_path

                changes["updated_at"] = datetime.now(timezone.utc)
                await self.post_service.save_post(post.model_copy(update=changes))
            except Exception:
                if cover_path is not None:
                    await self.cover_storage.remove(cover_path)
                elif request.cover is not None:
                    await self.cover_storage.discard(request.cover)
                raise

            logfire.info(
                "Post updated successfully",
                post_id=request.post_id,
                fields=sorted(changes),
            )
            return MessageResponse(message="Post updated successfully")
