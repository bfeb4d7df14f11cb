"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
"""

import re
from enum import Enum

from pydantic import field_validator

from surmise.domain.value.common import RootValueObject


class Username(RootValueObject[str]):
    """Public display name of a user.

    3-30 characters: letters, digits, underscore, dot or hyphen.
    """

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username format."""
        if not re.fullmatch(r"[A-Za-z0-9_.-]{3,30}", v):
            raise ValueError(
                "Username must be 3-30 characters of letters, digits, '_', '.' or '-'"
            )
        return v


class Theme(str, Enum):
    """Colour scheme the client renders with."""

    LIGHT = "light"
    DARK = "dark"
