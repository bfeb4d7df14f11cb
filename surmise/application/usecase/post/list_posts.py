"""List posts use case."""

from surmise.domain.service import PostService

from .common import PostResponse


class ListPostsUseCase:
    """Use case for listing every post, newest first."""

    def __init__(self, post_service: PostService) -> None:
        self.post_service = post_service

    async def execute(self) -> list[PostResponse]:
        posts = await self.post_service.list_posts()
        return [PostResponse.from_post(post) for post in posts]
