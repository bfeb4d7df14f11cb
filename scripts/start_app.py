#!/usr/bin/env python3
"""Serve the API with uvicorn, reporting boot failures to Logfire."""

import sys

import logfire
import uvicorn

from surmise.config import Settings
from surmise.util.logging import setup_logging
from surmise.util.observability import configure_logfire

APP_PATH = "surmise.interface.api.app:app"


def main() -> int:
    settings = Settings()
    # Logfire first so a failing import of the app is still recorded
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info(
        "Serving {app_path} on {host}:{port}",
        app_path=APP_PATH,
        host=settings.host,
        port=settings.port,
    )
    try:
        uvicorn.run(
            APP_PATH,
            host=settings.host,
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception:
        logfire.exception("API process crashed during startup")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
