"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any


class BaseUseCase(ABC):
    """Base for use cases that take a request model and return a response."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass
