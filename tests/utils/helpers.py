from typing import Any

import httpx


def assert_user_response_valid(data: dict[str, Any]) -> None:
    assert "id" in data
    assert "email" in data
    assert "name" in data
    assert "role" in data


def assert_error_envelope(data: dict[str, Any], code: str) -> None:
    assert data["success"] is False
    assert data["error"]["code"] == code
    assert data["error"]["message"]


def set_access_token_cookie(client: httpx.AsyncClient, access_token: str) -> None:
    """Set the access token cookie on the test client."""
    client.cookies.set("access_token", access_token)
