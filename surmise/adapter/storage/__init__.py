"""Cover storage adapters."""

from .cover import InMemoryCoverStorage, LocalCoverStorage

__all__ = ["InMemoryCoverStorage", "LocalCoverStorage"]
