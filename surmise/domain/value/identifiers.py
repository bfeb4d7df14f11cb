"""Strongly typed identifiers for domain entities.

Using NewType for strong typing prevents mixing up different entity IDs.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PostId = NewType("PostId", UUID)
