"""Unit tests for the catch-all error handler."""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from surmise.config import Settings
from surmise.interface.api.error_handlers import register_error_handlers


def _app(environment: str) -> FastAPI:
    app = FastAPI()
    register_error_handlers(app, Settings(environment=environment))

    @app.get("/boom")
    async def boom():
        raise RuntimeError("disk on fire")

    return app


@pytest.mark.parametrize(
    "environment,detail",
    [("production", "Internal server error"), ("development", "disk on fire")],
)
def test_unhandled_error_is_500(environment, detail):
    client = TestClient(_app(environment), raise_server_exceptions=False)

    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"detail": detail}
