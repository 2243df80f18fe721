"""Tests for the header factory."""
from __future__ import annotations

from efa_mcp.infrastructure.headers import make_headers


def test_make_headers_required_keys() -> None:
    headers = make_headers()
    for key in ["Accept", "Accept-Language", "Cache-Control", "User-Agent"]:
        assert key in headers, f"Missing required header: {key}"


def test_accept_includes_json() -> None:
    headers = make_headers()
    assert "application/json" in headers["Accept"]


def test_user_agent_non_empty() -> None:
    headers = make_headers()
    assert headers["User-Agent"], "User-Agent should be a non-empty string"


def test_accept_language_defaults_to_german() -> None:
    assert make_headers()["Accept-Language"].startswith("de")
    assert make_headers(language="en")["Accept-Language"].startswith("en")
