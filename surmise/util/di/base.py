"""Shared provider base class."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure pieces that tests may swap for in-memory fakes
Component = Literal["persistence", "storage"]


class ProviderBase(Provider):
    """Provider carrying the metadata the registry selects on.

    A component base sets ``__mock_component__``; its subclasses set
    ``__is_mock__`` to say which flavour they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
