"""Post domain service."""

import logfire

from surmise.domain.error import NotAuthorizedError, NotFoundError
from surmise.domain.model.post import Post
from surmise.domain.repository import PostRepository
from surmise.domain.value import PostId, UserId

from .base import Service


class PostService(Service):
    """Domain service for post operations."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def list_posts(self) -> list[Post]:
        """List every post, newest first."""
        with logfire.span("post_service.list_posts"):
            posts = await self.post_repository.find_all()
            logfire.info("Posts listed", count=len(posts))
            return posts

    async def get_post(self, post_id: PostId) -> Post:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If post not found
        """
        with logfire.span("post_service.get_post", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if post is None:
                logfire.warn("Post not found", post_id=str(post_id))
                raise NotFoundError("Post", str(post_id))
            return post

    async def get_owned_post(self, post_id: PostId, user_id: UserId) -> Post:
        """Get a post the given user is allowed to modify.

        Args:
            post_id: Post ID
            user_id: Identity attempting the change

        Returns:
            The post

        Raises:
            NotFoundError: If post not found
            NotAuthorizedError: If the user is not the author
        """
        post = await self.get_post(post_id)
        if not post.is_authored_by(user_id):
            logfire.warn(
                "Ownership check failed",
                post_id=str(post_id),
                author_id=str(post.author.id),
                user_id=str(user_id),
            )
            raise NotAuthorizedError("post", str(post_id), str(user_id))
        return post

    async def save_post(self, post: Post) -> Post:
        """Save a post.

        Args:
            post: Post to save

        Returns:
            Saved post
        """
        with logfire.span(
            "post_service.save_post", post_id=str(post.id), title=post.title
        ):
            saved = await self.post_repository.save(post)
            logfire.info("Post saved", post_id=str(saved.id))
            return saved

    async def delete_post(self, post_id: PostId) -> None:
        """Delete a post.

        Args:
            post_id: Post ID
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            await self.post_repository.delete(post_id)
            logfire.info("Post deleted", post_id=str(post_id))
