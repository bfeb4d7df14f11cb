"""Logfire wiring for the API process.

Application code logs through logfire directly:

    logfire.info("Post created", post_id=str(post.id))

    with logfire.span("post_service.save_post", post_id=str(post.id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from surmise.config import APP_VERSION, ObservabilitySettings, Settings

SERVICE_NAME = "surmise-api"


def _sends_to_cloud(observability: ObservabilitySettings) -> bool:
    """An explicit flag wins, otherwise a token switches cloud export on."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Set up Logfire for the current environment.

    Telemetry stays on the console unless OBSERVABILITY__LOGFIRE_TOKEN or
    OBSERVABILITY__SEND_TO_LOGFIRE says otherwise.
    """
    observability = settings.observability
    send = _sends_to_cloud(observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=APP_VERSION,
        environment=settings.environment,
        send_to_logfire=send,
        token=observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )

    logfire.info(
        "Logfire ready",
        environment=settings.environment,
        send_to_logfire=send,
        git_sha=settings.git_sha,
    )


def _request_attributes(request, attributes: dict) -> dict:
    """Attach method, path and client address to each request span."""
    mapped = dict(attributes)
    mapped["method"] = getattr(request, "method", None)
    mapped["path"] = request.url.path
    if request.client:
        mapped["client_host"] = request.client.host
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    # Headers are left out since the auth cookie travels in them
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run on ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
