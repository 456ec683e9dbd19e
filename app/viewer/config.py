"""Immutable client-side OAuth configuration."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.clients.linkedin_auth import build_authorization_url, generate_state
from app.viewer.backend import BackendClient, BackendError

logger = logging.getLogger(__name__)

DEFAULT_REDIRECT_URI = "http://localhost:3000"
DEFAULT_AUTHORIZATION_URL = "https://www.linkedin.com/oauth/v2/authorization"
DEFAULT_SCOPES = ("openid", "profile", "email")


class ConfigurationError(Exception):
    """Raised when login is attempted without a configured client id."""


@dataclass(frozen=True, slots=True)
class ClientConfig:
    """Public OAuth parameters, fixed once at startup."""

    client_id: str = ""
    redirect_uri: str = DEFAULT_REDIRECT_URI
    scopes: tuple[str, ...] = DEFAULT_SCOPES
    response_type: str = "code"
    authorization_url: str = DEFAULT_AUTHORIZATION_URL
    state: str = field(default_factory=generate_state)

    @property
    def login_enabled(self) -> bool:
        return bool(self.client_id)

    def authorization_request_url(self) -> str:
        if not self.client_id:
            raise ConfigurationError(
                "LinkedIn Client ID not configured. Please check your .env file "
                "and restart the server."
            )
        return build_authorization_url(
            authorization_url=self.authorization_url,
            client_id=self.client_id,
            redirect_uri=self.redirect_uri,
            scopes=self.scopes,
            state=self.state,
            response_type=self.response_type,
        )


async def load_config(backend: BackendClient) -> ClientConfig:
    """Fetch the backend's public config; fall back to a login-disabled config."""
    try:
        public = await backend.get_config()
    except BackendError as exc:
        logger.warning("Could not load LinkedIn config from backend: %s", exc)
        return ClientConfig()

    return ClientConfig(
        client_id=public.client_id or "",
        redirect_uri=public.redirect_uri or DEFAULT_REDIRECT_URI,
    )


__all__ = ["ClientConfig", "ConfigurationError", "load_config"]
