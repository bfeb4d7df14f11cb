"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from surmise.domain.model.post import Post
from surmise.domain.value import PostId


class PostRepository(ABC):
    """Repository for Post aggregate.

    Reads resolve the author reference to a display name. Writes store only
    the author id.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Post]:
        """Find every post, newest first.

        No pagination: this is a full scan.

        Returns:
            All posts ordered by created_at descending
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (create or full update).

        Updates overwrite the stored row; there is no version check, so the
        last concurrent write wins.

        Args:
            post: The post to save

        Returns:
            The saved post
        """
        pass

    @abstractmethod
    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete).

        Args:
            post_id: The post ID to delete
        """
        pass
