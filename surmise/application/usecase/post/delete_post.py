"""Delete post use case."""

import logfire
from pydantic import BaseModel

from surmise.domain.service import PostService
from surmise.domain.value import UserId

from .common import MessageResponse, parse_post_id


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str
    user_id: UserId


class DeletePostUseCase:
    """Use case for deleting a post.

    The cover file stays in storage; only the record is removed.
    """

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> MessageResponse:
        """Execute delete post flow.

        Raises:
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the user is not the author
        """
        post = await self.post_service.get_owned_post(
            parse_post_id(request.post_id), request.user_id
        )
        await self.post_service.delete_post(post.id)

        logfire.info("Post deleted successfully", post_id=str(post.id))
        return MessageResponse(message="Post deleted successfully")
