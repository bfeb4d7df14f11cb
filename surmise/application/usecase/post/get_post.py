"""Get post use case."""

from pydantic import BaseModel

from surmise.domain.service import PostService

from .common import PostResponse, parse_post_id


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # Raw path segment; malformed ids are not found


class GetPostUseCase:
    """Use case for retrieving a post by ID."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize get post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Execute get post flow.

        Args:
            request: Get post request

        Returns:
            The post with its author resolved

        Raises:
            NotFoundError: If no post has this id
        """
        post = await self.post_service.get_post(parse_post_id(request.post_id))
        return PostResponse.from_post(post)
