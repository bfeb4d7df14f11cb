"""Unit tests for the CORS origin policy."""

import pytest

from surmise.interface.api.cors import is_origin_allowed

ALLOW_LIST = ["https://surmise.example.com/", "https://blog.example.org"]


@pytest.mark.parametrize(
    "origin",
    [
        "https://surmise.example.com",
        "https://surmise.example.com/",
        "https://blog.example.org",
        "https://surmise-git-feature.vercel.app",
        "http://localhost:5173",
    ],
)
def test_allowed_origins(origin):
    assert is_origin_allowed(origin, ALLOW_LIST)


@pytest.mark.parametrize(
    "origin",
    ["https://evil.example.com", "https://blog.example.org.evil.com", "null"],
)
def test_blocked_origins(origin):
    assert not is_origin_allowed(origin, ALLOW_LIST)
