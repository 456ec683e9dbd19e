"""Public schema exports."""

from .auth import (
    ErrorResponse,
    PublicConfig,
    TokenExchangeRequest,
    TokenExchangeResponse,
)
from .profile import LinkedInProfile

__all__ = [
    "ErrorResponse",
    "LinkedInProfile",
    "PublicConfig",
    "TokenExchangeRequest",
    "TokenExchangeResponse",
]
