"""Rich-text editor configuration.

The client renders a Quill "snow" editor. The toolbar and accepted formats
are fixed; the palette follows the theme the client passes in.
"""

from typing import Any

from surmise.domain.value import Theme
from surmise.domain.value.common import ValueObject

# Quill toolbar groups, in display order
TOOLBAR: list[list[Any]] = [
    [{"header": [1, 2, 3, False]}],
    ["bold", "italic", "underline", "strike"],
    [{"color": []}, {"background": []}],
    [{"list": "ordered"}, {"list": "bullet"}],
    [{"indent": "-1"}, {"indent": "+1"}],
    [{"align": []}],
    ["blockquote", "code-block"],
    ["link", "image"],
    ["clean"],
]

FORMATS: list[str] = [
    "header",
    "bold",
    "italic",
    "underline",
    "strike",
    "color",
    "background",
    "list",
    "bullet",
    "indent",
    "align",
    "blockquote",
    "code-block",
    "link",
    "image",
]

PLACEHOLDER = "Write your blog post here..."
MIN_HEIGHT_PX = 300


class ThemePalette(ValueObject):
    """Colours applied to the editor surface and toolbar."""

    background: str
    text: str
    toolbar: str
    border: str
    icon: str
    placeholder: str


PALETTES: dict[Theme, ThemePalette] = {
    Theme.LIGHT: ThemePalette(
        background="#fafafa",
        text="#171717",
        toolbar="#f5f5f5",
        border="#e5e5e5",
        icon="#525252",
        placeholder="#737373",
    ),
    Theme.DARK: ThemePalette(
        background="#171717",
        text="#fafafa",
        toolbar="#262626",
        border="#404040",
        icon="#a3a3a3",
        placeholder="#737373",
    ),
}


class EditorConfig(ValueObject):
    """Everything the client needs to mount the editor."""

    theme: Theme
    placeholder: str
    min_height: int
    toolbar: list[list[Any]]
    formats: list[str]
    palette: ThemePalette


def build_editor_config(theme: Theme) -> EditorConfig:
    """Build the editor configuration for a theme."""
    return EditorConfig(
        theme=theme,
        placeholder=PLACEHOLDER,
        min_height=MIN_HEIGHT_PX,
        toolbar=TOOLBAR,
        formats=FORMATS,
        palette=PALETTES[theme],
    )
