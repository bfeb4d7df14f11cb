"""Mappers for converting between database rows and domain models.

Domain models are immutable Pydantic models, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from surmise.domain.model import Author, Post, User
from surmise.domain.value import PostId, UserId, Username


def _as_uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_as_uuid(row["id"])),
        username=Username(row["username"]),
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "password_hash": user.password_hash,
        "created_at": user.created_at,
    }


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert a posts row joined with its author's username.

    Args:
        row: Database row as dict; ``author_username`` is None when the
            author account no longer resolves

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_as_uuid(row["id"])),
        title=row["title"],
        summary=row["summary"],
        content=row["content"],
        cover=row.get("cover"),
        author=Author(
            id=UserId(_as_uuid(row["author_id"])),
            username=row.get("author_username"),
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Only the author id is stored; the username is resolved on reads.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "title": post.title,
        "summary": post.summary,
        "content": post.content,
        "cover": post.cover,
        "author_id": post.author.id,
        "created_at": post.created_at,
        "updated_at": post.updated_at,
    }
