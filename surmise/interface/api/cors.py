"""Cross-origin policy.

An origin is allowed when, without its trailing slash, it is in the
configured allow-list, or when it is a Vercel preview deployment or a local
development server.
"""

import logfire
from fastapi import FastAPI, Request
from starlette.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp

PERMITTED_ORIGIN_FRAGMENTS = ("vercel.app", "localhost")


def normalize_origin(origin: str) -> str:
    """Strip the trailing slash browsers and config files disagree on."""
    return origin.rstrip("/")


def is_origin_allowed(origin: str, allowed_origins: list[str]) -> bool:
    """Check an Origin header against the policy.

    Args:
        origin: Value of the Origin request header
        allowed_origins: Configured allow-list

    Returns:
        Whether cross-origin requests from this origin are accepted
    """
    normalized = normalize_origin(origin)
    if normalized in {normalize_origin(o) for o in allowed_origins}:
        return True
    return any(fragment in normalized for fragment in PERMITTED_ORIGIN_FRAGMENTS)


class OriginPolicyCORSMiddleware(CORSMiddleware):
    """Starlette CORS middleware deciding origins with ``is_origin_allowed``."""

    def __init__(self, app: ASGIApp, allowed_origins: list[str]) -> None:
        super().__init__(
            app,
            allow_origins=[],
            allow_credentials=True,
            allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
            allow_headers=["Content-Type", "Authorization"],
            expose_headers=["set-cookie"],
        )
        self.policy_origins = list(allowed_origins)

    def is_allowed_origin(self, origin: str) -> bool:
        if is_origin_allowed(origin, self.policy_origins):
            return True
        logfire.warn("CORS origin blocked", origin=origin)
        return False


def add_upload_cors_headers(
    app: FastAPI, mount_path: str, allowed_origins: list[str]
) -> None:
    """Add the CORS headers served with uploaded media.

    Images are fetched by <img> tags without an Origin header as well as by
    scripts, so a request without Origin gets ``*``.

    Args:
        app: FastAPI application
        mount_path: URL prefix of the uploads mount
        allowed_origins: Configured allow-list
    """
    prefix = mount_path.rstrip("/") + "/"

    @app.middleware("http")
    async def upload_cors_headers(request: Request, call_next):
        response = await call_next(request)
        if not request.url.path.startswith(prefix):
            return response

        origin = request.headers.get("origin")
        if origin is None:
            response.headers["Access-Control-Allow-Origin"] = "*"
        elif is_origin_allowed(origin, allowed_origins):
            response.headers["Access-Control-Allow-Origin"] = origin
        response.headers["Access-Control-Allow-Credentials"] = "true"
        return response
