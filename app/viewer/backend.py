"""HTTP client the viewer uses to talk to its own backend."""

from __future__ import annotations

from typing import Any, Optional

import httpx
from pydantic import ValidationError

from app.schemas import LinkedInProfile, PublicConfig

CONFIG_PATH = "/api/linkedin/config"
TOKEN_PATH = "/api/linkedin/token"
PROFILE_PATH = "/api/linkedin/profile"


class BackendError(Exception):
    """A backend call failed.

    ``detail`` carries the backend's ``error`` text when it sent one, and is
    ``None`` for transport failures or unparseable responses.
    """

    def __init__(self, message: str, *, detail: Optional[str] = None, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.detail = detail
        self.status_code = status_code


def _error_detail(response: httpx.Response) -> Optional[str]:
    try:
        payload = response.json()
    except ValueError:
        return None
    if isinstance(payload, dict) and isinstance(payload.get("error"), str):
        return payload["error"]
    return None


class BackendClient:
    """Call the config, token-exchange and profile endpoints."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

    async def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise BackendError(f"{method} {path} failed: {exc}") from exc

        if not response.is_success:
            raise BackendError(
                f"{method} {path} returned {response.status_code}",
                detail=_error_detail(response),
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise BackendError(f"{method} {path} returned invalid JSON") from exc

    async def get_config(self) -> PublicConfig:
        payload = await self._request("GET", CONFIG_PATH)
        try:
            return PublicConfig.model_validate(payload)
        except ValidationError as exc:
            raise BackendError("Malformed config payload") from exc

    async def exchange_code(self, code: str) -> str:
        payload = await self._request("POST", TOKEN_PATH, json={"code": code})
        access_token = payload.get("access_token") if isinstance(payload, dict) else None
        if not access_token:
            raise BackendError("Token response did not include an access token")
        return access_token

    async def fetch_profile(self, access_token: str) -> LinkedInProfile:
        payload = await self._request(
            "GET",
            PROFILE_PATH,
            headers={"Authorization": f"Bearer {access_token}"},
        )
        try:
            return LinkedInProfile.model_validate(payload)
        except ValidationError as exc:
            raise BackendError("Malformed profile payload") from exc


__all__ = ["BackendClient", "BackendError"]
