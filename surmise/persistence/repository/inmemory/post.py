"""In-memory post repository for testing."""

from itertools import count
from typing import Optional

from surmise.domain.model.post import Author, Post
from surmise.domain.repository.post import PostRepository
from surmise.domain.repository.user import UserRepository
from surmise.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    When given a user repository, reads resolve author usernames from it the
    way the SQL join does.
    """

    def __init__(self, user_repository: UserRepository | None = None) -> None:
        self._posts: dict[PostId, Post] = {}
        self._sequence: dict[PostId, int] = {}
        self._counter = count()
        self._users = user_repository

    async def _resolve_author(self, post: Post) -> Post:
        if self._users is None:
            return post
        user = await self._users.find_by_id(post.author.id)
        username = user.username.root if user else None
        author = Author(id=post.author.id, username=username)
        return post.model_copy(update={"author": author})

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        post = self._posts.get(post_id)
        return await self._resolve_author(post) if post else None

    async def find_all(self) -> list[Post]:
        """Find every post, newest first (insertion order breaks ties)."""
        posts = sorted(
            self._posts.values(),
            key=lambda p: (p.created_at, self._sequence[p.id]),
            reverse=True,
        )
        return [await self._resolve_author(p) for p in posts]

    async def save(self, post: Post) -> Post:
        """Save or replace a post."""
        existing = self._posts.get(post.id)
        if existing is not None:
            # created_at and author are fixed at creation
            post = post.model_copy(
                update={"created_at": existing.created_at, "author": existing.author}
            )
        else:
            self._sequence[post.id] = next(self._counter)
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post."""
        self._posts.pop(post_id, None)
        self._sequence.pop(post_id, None)
