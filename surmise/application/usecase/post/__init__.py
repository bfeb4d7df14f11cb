"""Post use cases."""

from .common import AuthorInfo, MessageResponse, PostResponse
from .create_post import CreatePostRequest, CreatePostUseCase
from .delete_post import DeletePostRequest, DeletePostUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .list_posts import ListPostsUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase

__all__ = [
    "AuthorInfo",
    "CreatePostRequest",
    "CreatePostUseCase",
    "DeletePostRequest",
    "DeletePostUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "ListPostsUseCase",
    "MessageResponse",
    "PostResponse",
    "UpdatePostRequest",
    "UpdatePostUseCase",
]
