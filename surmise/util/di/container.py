"""Container construction for the API process."""

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from surmise.util.di import select_providers


def create_container() -> AsyncContainer:
    """Production container: every component uses its real implementation."""
    # FastapiProvider makes the current Request resolvable in REQUEST scope
    return make_async_container(*select_providers(mocked=set()), FastapiProvider())


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    setup_dishka(container, app)
