"""
FastAPI routes for the LinkedIn OAuth proxy.

The three LinkedIn endpoints are stateless pass-throughs: nothing about the
user or their token is kept between requests.
"""

from __future__ import annotations

import logging
from http import HTTPStatus
from typing import Annotated, Any

import httpx
from fastapi import APIRouter, Depends, Header, HTTPException
from fastapi.responses import JSONResponse

from app.clients.linkedin_auth import LinkedInAPIError
from app.dependencies import get_linkedin_oauth_client, get_public_config
from app.schemas import (
    ErrorResponse,
    PublicConfig,
    TokenExchangeRequest,
    TokenExchangeResponse,
)

router = APIRouter()
logger = logging.getLogger(__name__)

_BEARER_PREFIX = "Bearer "


def _extract_bearer_token(authorization: str | None) -> str:
    if not authorization or not authorization.startswith(_BEARER_PREFIX):
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail="Authorization header required",
        )
    token = authorization[len(_BEARER_PREFIX):].strip()
    if not token:
        raise HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail="Authorization header required",
        )
    return token


def _log_provider_failure(context: str, exc: Exception) -> None:
    if isinstance(exc, LinkedInAPIError):
        logger.error(
            "%s: status=%s body=%s",
            context,
            exc.status_code,
            exc.body,
        )
    else:
        logger.error("%s: %s", context, exc)


@router.get("/health", status_code=HTTPStatus.OK)
async def healthcheck() -> dict:
    """Simple health endpoint for monitoring."""
    return {"status": "ok"}


@router.get("/linkedin/config", response_model=PublicConfig)
async def get_linkedin_config(
    config: Annotated[PublicConfig, Depends(get_public_config)],
) -> PublicConfig:
    """Disclose the public OAuth parameters; the client secret never leaves the server."""
    return config


@router.post(
    "/linkedin/token",
    response_model=TokenExchangeResponse,
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def exchange_linkedin_token(
    oauth_client: Annotated[Any, Depends(get_linkedin_oauth_client)],
    payload: TokenExchangeRequest | None = None,
) -> TokenExchangeResponse:
    """Redeem an authorization code for an access token."""
    code = payload.code if payload else None
    if not code:
        raise HTTPException(
            status_code=HTTPStatus.BAD_REQUEST,
            detail="Authorization code is required",
        )

    try:
        access_token = await oauth_client.exchange_authorization_code(code)
    except (LinkedInAPIError, httpx.HTTPError, ValueError) as exc:
        _log_provider_failure("LinkedIn token response error", exc)
        raise HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail="Failed to exchange code for token",
        ) from exc

    return TokenExchangeResponse(access_token=access_token)


@router.get(
    "/linkedin/profile",
    responses={
        401: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def get_linkedin_profile(
    oauth_client: Annotated[Any, Depends(get_linkedin_oauth_client)],
    authorization: Annotated[str | None, Header()] = None,
) -> JSONResponse:
    """Fetch the caller's userinfo and pass LinkedIn's payload through unmodified."""
    access_token = _extract_bearer_token(authorization)

    try:
        profile = await oauth_client.fetch_userinfo(access_token)
    except (LinkedInAPIError, httpx.HTTPError, ValueError) as exc:
        _log_provider_failure("LinkedIn profile response error", exc)
        raise HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail="Failed to fetch profile data",
        ) from exc

    return JSONResponse(content=profile)


__all__ = ["router"]
