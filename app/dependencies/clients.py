"""
Factory functions to provide shared clients as FastAPI dependencies.
"""

from functools import lru_cache

from app.clients import LinkedInOAuthClient
from app.core.config import get_settings


@lru_cache()
def _settings():
    """Internal helper to cache settings for client factories."""
    return get_settings()


@lru_cache()
def get_linkedin_oauth_client() -> LinkedInOAuthClient:
    """Create a singleton LinkedIn OAuth client."""
    settings = _settings()
    return LinkedInOAuthClient(settings.linkedin, settings.oauth)


__all__ = ["get_linkedin_oauth_client"]
