"""
Application configuration models and helpers.

Centralizes settings management so the FastAPI backend, the terminal client
and the operator scripts share a consistent configuration surface.
"""

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Optional

import os

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict

DEFAULT_STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


def _load_env_file(path: str = ".env") -> None:
    """Best-effort load key=value pairs from a .env file without extra deps."""
    env_path = Path(path)
    if not env_path.exists():
        return
    for raw_line in env_path.read_text().splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        if not key or key in os.environ:
            continue
        cleaned = value.strip().strip('"').strip("'")
        os.environ[key] = cleaned


_load_env_file()


class LinkedInSettings(BaseSettings):
    """Credentials of the registered LinkedIn application."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    client_id: Optional[str] = Field(None, validation_alias="LINKEDIN_CLIENT_ID")
    client_secret: Optional[str] = Field(
        None,
        validation_alias="LINKEDIN_CLIENT_SECRET",
        description="Confidential secret; never disclosed to the browser.",
    )
    redirect_uri: Optional[str] = Field(
        None,
        validation_alias="LINKEDIN_REDIRECT_URI",
        description="Defaults to http://localhost:<PORT> when omitted.",
    )

    @field_validator("client_id", "client_secret", "redirect_uri", mode="before")
    @classmethod
    def _blank_as_missing(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class OAuthSettings(BaseSettings):
    """OAuth flow configuration."""

    model_config = SettingsConfigDict(extra="ignore", populate_by_name=True)

    authorization_url: str = Field(
        "https://www.linkedin.com/oauth/v2/authorization",
        validation_alias="LINKEDIN_AUTHORIZATION_URL",
    )
    token_url: str = Field(
        "https://www.linkedin.com/oauth/v2/accessToken",
        validation_alias="LINKEDIN_TOKEN_URL",
    )
    userinfo_url: str = Field(
        "https://api.linkedin.com/v2/userinfo",
        validation_alias="LINKEDIN_USERINFO_URL",
    )
    scopes: Annotated[tuple[str, ...], NoDecode] = Field(
        ("openid", "profile", "email"),
        validation_alias="LINKEDIN_SCOPES",
    )
    http_timeout_seconds: float = Field(10.0, validation_alias="LINKEDIN_HTTP_TIMEOUT")

    @field_validator("scopes", mode="before")
    @classmethod
    def _split_scopes(
        cls, value: str | tuple[str, ...] | list[str]
    ) -> tuple[str, ...]:
        """Support providing scopes as a comma or space separated string."""
        if isinstance(value, tuple):
            return value
        if isinstance(value, list):
            return tuple(value)
        return tuple(scope for scope in value.replace(",", " ").split() if scope)


class AppSettings(BaseSettings):
    """Root settings object for the FastAPI application."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    environment: str = Field("development", validation_alias="APP_ENV")
    log_level: str = Field("INFO", validation_alias="APP_LOG_LEVEL")
    host: str = Field("127.0.0.1", validation_alias="APP_HOST")
    port: int = Field(3000, validation_alias="PORT")
    static_dir: Path = Field(
        DEFAULT_STATIC_DIR,
        validation_alias="STATIC_DIR",
        description="Directory holding index.html and any other frontend assets.",
    )
    linkedin: LinkedInSettings = Field(default_factory=LinkedInSettings)
    oauth: OAuthSettings = Field(default_factory=OAuthSettings)

    @model_validator(mode="after")
    def _default_redirect_uri(self) -> "AppSettings":
        if not self.linkedin.redirect_uri:
            self.linkedin.redirect_uri = f"http://localhost:{self.port}"
        return self


@lru_cache()
def get_settings() -> AppSettings:
    """Return a cached settings object."""
    return AppSettings()


__all__ = [
    "AppSettings",
    "LinkedInSettings",
    "OAuthSettings",
    "get_settings",
]
