"""Response models shared by the post use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from surmise.domain.error import NotFoundError
from surmise.domain.model import Post
from surmise.domain.value import PostId


class AuthorInfo(BaseModel):
    """Author of a post as shown to clients."""

    id: str
    username: str | None


class PostResponse(BaseModel):
    """A post as returned by the API."""

    id: str
    title: str
    summary: str
    content: str
    cover: str | None
    author: AuthorInfo
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostResponse":
        return cls(
            id=str(post.id),
            title=post.title,
            summary=post.summary,
            content=post.content,
            cover=post.cover,
            author=AuthorInfo(id=str(post.author.id), username=post.author.username),
            created_at=post.created_at,
            updated_at=post.updated_at,
        )


class MessageResponse(BaseModel):
    """Acknowledgement of a mutation."""

    message: str


def parse_post_id(raw: str) -> PostId:
    """Parse a post id from a path segment.

    Raises:
        NotFoundError: If the id is not a valid UUID, since no post can have it
    """
    try:
        return PostId(UUID(raw))
    except ValueError:
        raise NotFoundError("Post", raw)
