"""Schemas related to OAuth flows."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class PublicConfig(BaseModel):
    """OAuth parameters that are safe to disclose to the browser."""

    model_config = ConfigDict(populate_by_name=True)

    client_id: Optional[str] = Field(None, alias="clientId")
    redirect_uri: str = Field(..., alias="redirectUri")


class TokenExchangeRequest(BaseModel):
    """Payload sent by the client to redeem an authorization code."""

    code: Optional[str] = Field(
        None, description="Authorization code returned by LinkedIn OAuth."
    )


class TokenExchangeResponse(BaseModel):
    """Only the access token is handed back to the client."""

    access_token: str


class ErrorResponse(BaseModel):
    error: str


__all__ = [
    "ErrorResponse",
    "PublicConfig",
    "TokenExchangeRequest",
    "TokenExchangeResponse",
]
