"""Health check routes."""

from datetime import datetime, timezone

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel

from surmise.config import APP_VERSION, Settings
from surmise.interface.api.cors import is_origin_allowed

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    timestamp: datetime
    environment: str
    cors_origins: list[str]
    version: str
    git_sha: str


class CORSDebugResponse(BaseModel):
    """CORS debugging information."""

    origin: str | None
    allowed: bool
    allowed_origins: list[str]


@router.get("/health", response_model=HealthResponse)
async def health_check(settings: FromDishka[Settings]) -> HealthResponse:
    """Basic health check endpoint.

    Returns:
        Health status indicating the service is running
    """
    return HealthResponse(
        status="OK",
        timestamp=datetime.now(timezone.utc),
        environment=settings.environment,
        cors_origins=settings.allowed_origins,
        version=APP_VERSION,
        git_sha=settings.git_sha,
    )


@router.get("/health/cors", response_model=CORSDebugResponse)
async def cors_debug(
    request: Request, settings: FromDishka[Settings]
) -> CORSDebugResponse:
    """Echo the request origin and whether the CORS policy accepts it."""
    origin = request.headers.get("origin")
    return CORSDebugResponse(
        origin=origin,
        allowed=origin is not None
        and is_origin_allowed(origin, settings.allowed_origins),
        allowed_origins=settings.allowed_origins,
    )
