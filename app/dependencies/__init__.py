"""Expose dependency helpers for FastAPI routers."""

from .clients import get_linkedin_oauth_client
from .config import (
    SettingsDependency,
    get_app_settings,
    get_public_config,
    get_static_dir,
)

__all__ = [
    "SettingsDependency",
    "get_app_settings",
    "get_linkedin_oauth_client",
    "get_public_config",
    "get_static_dir",
]
