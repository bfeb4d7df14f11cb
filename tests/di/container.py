"""Containers for tests, with real implementations opted into per component."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider

from surmise.util.di import PROVIDERS, Component, component_of, select_providers


def known_components() -> set[Component]:
    return {name for name in map(component_of, PROVIDERS) if name is not None}


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every component is mocked unless unmocked.

    ``build_test_container()`` suits unit and e2e tests, while
    ``build_test_container(unmock={"persistence"})`` talks to PostgreSQL.
    Settings come from the environment prepared in conftest.
    """
    unmock = set(unmock or ())
    unknown = unmock - known_components()
    if unknown:
        raise ValueError(f"Unknown components: {sorted(unknown)}")

    mocked = known_components() - unmock
    return make_async_container(*select_providers(mocked), FastapiProvider())
