"""
FastAPI application entrypoint for the LinkedIn profile viewer backend.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.frontend import router as frontend_router
from app.api.routes import router as api_router
from app.core.config import AppSettings, get_settings
from app.core.logging import configure_logging

logger = logging.getLogger(__name__)


async def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Rejected malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=HTTPStatus.BAD_REQUEST,
        content={"error": "Invalid request payload"},
    )


def _log_startup(settings: AppSettings) -> None:
    logger.info(
        "LinkedIn Profile Viewer is running at http://%s:%s",
        settings.host,
        settings.port,
    )
    logger.info("Expected LinkedIn redirect URI: %s", settings.linkedin.redirect_uri)
    if not settings.linkedin.client_id:
        logger.warning(
            "LinkedIn client ID not found in environment variables; "
            "set LINKEDIN_CLIENT_ID and LINKEDIN_CLIENT_SECRET in .env"
        )
    else:
        logger.info("LinkedIn client ID loaded from environment")


def create_app(settings: AppSettings | None = None) -> FastAPI:
    """Factory for the FastAPI application."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        _log_startup(settings)
        yield
        logger.info("Server shutting down gracefully")

    app = FastAPI(
        title="LinkedIn Profile Viewer",
        version="0.1.0",
        description="Confidential OAuth proxy for viewing a LinkedIn profile.",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.include_router(api_router, prefix="/api")
    # Registered last so the catch-all path never shadows an API route.
    app.include_router(frontend_router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
