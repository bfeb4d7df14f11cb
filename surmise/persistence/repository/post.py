"""PostgreSQL implementation of Post repository."""

from typing import List, Optional

import logfire
from sqlalchemy import Select, desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from surmise.domain.model import Post
from surmise.domain.repository.post import PostRepository
from surmise.domain.value import PostId
from surmise.persistence.database import rollback_on_error
from surmise.persistence.mappers import post_to_dict, row_to_post
from surmise.persistence.tables import posts_table, users_table


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @staticmethod
    def _select_with_author() -> Select:
        """Select posts with the author's username resolved."""
        return select(
            posts_table,
            users_table.c.username.label("author_username"),
        ).select_from(
            posts_table.outerjoin(
                users_table, posts_table.c.author_id == users_table.c.id
            )
        )

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=str(post_id)):
            stmt = self._select_with_author().where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.mappings().first()

            if not row:
                return None

            return row_to_post(dict(row))

    async def find_all(self) -> List[Post]:
        """Find every post, newest first."""
        with logfire.span("post_repository.find_all"):
            stmt = self._select_with_author().order_by(
                desc(posts_table.c.created_at), desc(posts_table.c.seq)
            )
            result = await self.session.execute(stmt)
            posts = [row_to_post(dict(row)) for row in result.mappings().all()]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def save(self, post: Post) -> Post:
        """Save a post (create or full update)."""
        with logfire.span("post_repository.save", post_id=str(post.id)):
            exists = await self.session.scalar(
                select(posts_table.c.id).where(posts_table.c.id == post.id)
            )

            post_dict = post_to_dict(post)

            if exists:
                logfire.info("Updating existing post", post_id=str(post.id))
                # created_at and author are fixed at creation
                post_dict.pop("created_at")
                post_dict.pop("author_id")
                stmt = (
                    posts_table.update()
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                )
            else:
                logfire.info(
                    "Inserting new post",
                    post_id=str(post.id),
                    author_id=str(post.author.id),
                )
                stmt = posts_table.insert().values(**post_dict)

            async with rollback_on_error(self.session):
                await self.session.execute(stmt)
                await self.session.flush()
            return post

    async def delete(self, post_id: PostId) -> None:
        """Delete a post (hard delete)."""
        with logfire.span("post_repository.delete", post_id=str(post_id)):
            stmt = posts_table.delete().where(posts_table.c.id == post_id)
            async with rollback_on_error(self.session):
                await self.session.execute(stmt)
                await self.session.flush()
