"""Expose constructed client wrappers."""

from .linkedin_auth import LinkedInAPIError, LinkedInOAuthClient
from .sqlite_store import SQLiteStore

__all__ = [
    "LinkedInAPIError",
    "LinkedInOAuthClient",
    "SQLiteStore",
]
