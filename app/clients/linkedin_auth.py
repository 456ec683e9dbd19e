"""
LinkedIn OAuth utilities.

These helpers perform the two provider calls that need the confidential
client secret or a user's bearer token: the authorization-code exchange and
the OpenID Connect userinfo lookup.
"""

from __future__ import annotations

import secrets
from typing import Any, Dict, Optional
from urllib.parse import urlencode

import httpx

from app.core.config import LinkedInSettings, OAuthSettings

STATE_PREFIX = "linkedin_oauth_"


def generate_state() -> str:
    """Return a fresh opaque state value for one login attempt."""
    return STATE_PREFIX + secrets.token_urlsafe(8)


def build_authorization_url(
    *,
    authorization_url: str,
    client_id: str,
    redirect_uri: str,
    scopes: tuple[str, ...],
    state: str,
    response_type: str = "code",
) -> str:
    """Construct the LinkedIn consent URL."""
    params = {
        "response_type": response_type,
        "client_id": client_id,
        "redirect_uri": redirect_uri,
        "scope": " ".join(scopes),
        "state": state,
    }
    return f"{authorization_url}?{urlencode(params)}"


class LinkedInAPIError(Exception):
    """Raised when LinkedIn answers with a non-success status or bad payload."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, body: str = "") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.body = body


class LinkedInOAuthClient:
    """Exchange authorization codes and fetch userinfo on LinkedIn."""

    def __init__(
        self,
        linkedin_settings: LinkedInSettings,
        oauth_settings: OAuthSettings,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._linkedin = linkedin_settings
        self._oauth = oauth_settings
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self._oauth.http_timeout_seconds,
            transport=self._transport,
        )

    async def exchange_authorization_code(self, code: str) -> str:
        """
        Exchange an authorization code for an access token.

        Only the access token is returned; refresh and expiry metadata are
        discarded.
        """
        payload = {
            "grant_type": "authorization_code",
            "code": code,
            "client_id": self._linkedin.client_id or "",
            "client_secret": self._linkedin.client_secret or "",
            "redirect_uri": self._linkedin.redirect_uri or "",
        }

        async with self._client() as client:
            response = await client.post(self._oauth.token_url, data=payload)

        if not response.is_success:
            raise LinkedInAPIError(
                f"LinkedIn API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                body=response.text,
            )

        token_payload = response.json()
        access_token = (
            token_payload.get("access_token") if isinstance(token_payload, dict) else None
        )
        if not access_token:
            raise LinkedInAPIError(
                "Incomplete token payload returned from LinkedIn.",
                status_code=response.status_code,
                body=response.text,
            )
        return access_token

    async def fetch_userinfo(self, access_token: str) -> Dict[str, Any]:
        """Return the OpenID Connect userinfo payload for the token's owner."""
        headers = {
            "Authorization": f"Bearer {access_token}",
            "cache-control": "no-cache",
        }

        async with self._client() as client:
            response = await client.get(self._oauth.userinfo_url, headers=headers)

        if not response.is_success:
            raise LinkedInAPIError(
                f"LinkedIn Profile API error: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
                body=response.text,
            )
        return response.json()


__all__ = [
    "LinkedInAPIError",
    "LinkedInOAuthClient",
    "STATE_PREFIX",
    "build_authorization_url",
    "generate_state",
]
