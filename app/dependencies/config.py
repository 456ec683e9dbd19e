"""
FastAPI dependency utilities for injecting configuration.
"""

from functools import lru_cache
from pathlib import Path

from fastapi import Depends

from app.core.config import AppSettings, get_settings
from app.schemas import PublicConfig


@lru_cache()
def _settings_singleton() -> AppSettings:
    """Ensure configuration is created once per process."""
    return get_settings()


def get_app_settings() -> AppSettings:
    """FastAPI dependency returning application settings."""
    return _settings_singleton()


SettingsDependency = Depends(get_app_settings)


def get_public_config(settings: AppSettings = SettingsDependency) -> PublicConfig:
    """The browser-safe subset of the LinkedIn settings (no client secret)."""
    return PublicConfig(
        client_id=settings.linkedin.client_id,
        redirect_uri=settings.linkedin.redirect_uri or "",
    )


def get_static_dir(settings: AppSettings = SettingsDependency) -> Path:
    return Path(settings.static_dir).resolve()


__all__ = [
    "SettingsDependency",
    "get_app_settings",
    "get_public_config",
    "get_static_dir",
]
