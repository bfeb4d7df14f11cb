"""Provider registry.

Config, domain and application providers are concrete. Persistence and
storage are components: each has a production and a mock subclass, and the
caller decides which one goes into the container.
"""

from typing import Type

from surmise.util.di.application import ProdApplicationProvider
from surmise.util.di.base import Component, ProviderBase
from surmise.util.di.core import ProdConfigProvider
from surmise.util.di.domain import ProdDomainProvider
from surmise.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
    ProdStorageProvider,
    StorageProvider,
)

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    PersistenceProvider,
    StorageProvider,
]


def component_of(base: Type[ProviderBase]) -> Component | None:
    """Name of the swappable component ``base`` stands for, if any."""
    if not base.__subclasses__():
        return None
    return getattr(base, "__mock_component__", None)


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve ``base`` to the provider class to instantiate.

    Concrete providers come back unchanged. For a component, the subclass
    whose ``__is_mock__`` equals ``use_mock`` is returned; a ValueError is
    raised when there is none.
    """
    if component_of(base) is None:
        return base

    for candidate in base.__subclasses__():
        if getattr(candidate, "__is_mock__", False) == use_mock:
            return candidate

    flavour = "mock" if use_mock else "production"
    raise ValueError(f"No {flavour} implementation for {component_of(base)}")


def select_providers(mocked: set[Component]) -> list[ProviderBase]:
    """Instantiate every registered provider, mocking the named components."""
    return [
        get_provider(base, use_mock=component_of(base) in mocked)()
        for base in PROVIDERS
    ]


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "component_of",
    "get_provider",
    "select_providers",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "StorageProvider",
    "ProdPersistenceProvider",
    "ProdStorageProvider",
]
