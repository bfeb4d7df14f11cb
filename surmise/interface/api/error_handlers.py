"""Global exception handlers.

Routes translate the errors they expect into HTTP responses themselves.
Anything that escapes them ends up here as a 500.
"""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from surmise.config import Settings


def register_error_handlers(app: FastAPI, settings: Settings) -> None:
    """Register the catch-all handler on the FastAPI app."""

    @app.exception_handler(Exception)
    async def unhandled_error_handler(request: Request, exc: Exception):
        logfire.error(
            "Unhandled exception",
            path=request.url.path,
            error=str(exc),
            error_type=type(exc).__name__,
        )
        # Internal details are only shown outside production
        if settings.environment == "production":
            detail = "Internal server error"
        else:
            detail = str(exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"detail": detail},
        )
