"""Pytest configuration shared across the suite."""

try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

from typing import Any

import httpx
import pytest

PROFILE_PAYLOAD: dict[str, Any] = {
    "sub": "782bbtaQ",
    "name": "Ada Lovelace",
    "given_name": "Ada",
    "family_name": "Lovelace",
    "picture": "https://media.licdn.com/dms/image/ada.jpg",
    "locale": {"country": "GB", "language": "en"},
    "email": "ada@example.com",
    "email_verified": True,
}


class FakeLinkedIn:
    """Stands in for LinkedIn's token and userinfo endpoints."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.token_status = 200
        self.token_json: Any = {
            "access_token": "abc123",
            "expires_in": 5183999,
            "scope": "email,openid,profile",
            "token_type": "Bearer",
            "id_token": "eyJ0eXAi.payload.sig",
        }
        self.userinfo_status = 200
        self.userinfo_json: Any = dict(PROFILE_PAYLOAD)
        self.fail_transport = False

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.fail_transport:
            raise httpx.ConnectError("connection refused", request=request)
        if request.url.path == "/oauth/v2/accessToken":
            return httpx.Response(self.token_status, json=self.token_json)
        if request.url.path == "/v2/userinfo":
            return httpx.Response(self.userinfo_status, json=self.userinfo_json)
        return httpx.Response(404, json={"message": "not found"})

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


@pytest.fixture
def anyio_backend() -> str:
    """Force AnyIO-powered tests to run against asyncio backend only."""
    return "asyncio"


@pytest.fixture()
def linkedin():
    """Route the app's LinkedIn client through a ``FakeLinkedIn``."""
    from app import dependencies
    from app.clients import LinkedInOAuthClient
    from app.core.config import get_settings
    from app.main import app

    fake = FakeLinkedIn()
    settings = get_settings()
    client = LinkedInOAuthClient(settings.linkedin, settings.oauth, transport=fake.transport)
    app.dependency_overrides[dependencies.get_linkedin_oauth_client] = lambda: client

    yield fake

    app.dependency_overrides.clear()
