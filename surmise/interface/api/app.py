"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import logfire
from dishka import AsyncContainer
from fastapi import APIRouter, FastAPI
from fastapi.staticfiles import StaticFiles

from surmise.config import APP_VERSION, Settings
from surmise.interface.api.cors import (
    OriginPolicyCORSMiddleware,
    add_upload_cors_headers,
)
from surmise.interface.api.error_handlers import register_error_handlers
from surmise.interface.api.routes import auth, editor, health, posts
from surmise.persistence.database import DatabaseProbe
from surmise.util.di.container import create_container, setup_di
from surmise.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Check the database on startup and close the container on shutdown.

    A database that can't be reached at startup is fatal: the error is
    logged and re-raised so the server exits.
    """
    container: AsyncContainer = app.state.dishka_container
    probe = await container.get(DatabaseProbe)
    try:
        await probe.check()
    except Exception as e:
        logfire.error(
            "Database connection failed",
            error=str(e),
            error_type=type(e).__name__,
        )
        raise
    logfire.info("Database connection established")

    yield

    await container.close()


def create_app(
    container: AsyncContainer | None = None, settings: Settings | None = None
) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, conftest.py configures it.

    Args:
        container: DI container; the production container when omitted
        settings: Settings for middleware and mounts; read from the
            environment when omitted

    Returns:
        The application
    """
    settings = settings or Settings()

    app_instance = FastAPI(
        title="Surmise API",
        description="Backend API for Surmise - a minimal blogging platform",
        version=APP_VERSION,
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    add_upload_cors_headers(
        app_instance, settings.uploads.mount_path, settings.allowed_origins
    )
    app_instance.add_middleware(
        OriginPolicyCORSMiddleware, allowed_origins=settings.allowed_origins
    )

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance, settings)

    # Register routes
    app_instance.include_router(health.router)

    api = APIRouter(prefix="/api")
    api.include_router(auth.router)
    api.include_router(posts.router)
    api.include_router(editor.router)
    app_instance.include_router(api)

    # Uploaded covers
    Path(settings.uploads.directory).mkdir(parents=True, exist_ok=True)
    app_instance.mount(
        settings.uploads.mount_path,
        StaticFiles(directory=settings.uploads.directory),
        name="uploads",
    )

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
# In tests: configure in conftest.py
app = create_app()
