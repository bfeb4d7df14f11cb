"""Domain model entities."""

from surmise.domain.model.editor import EditorConfig, ThemePalette
from surmise.domain.model.post import Author, Post
from surmise.domain.model.user import User

__all__ = [
    "Author",
    "EditorConfig",
    "Post",
    "ThemePalette",
    "User",
]
