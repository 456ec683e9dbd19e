"""
Pydantic model for the OpenID Connect userinfo payload.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LinkedInProfile(BaseModel):
    """Read-only snapshot of the fields the viewer renders.

    Any additional claims LinkedIn returns (``sub``, ``locale``,
    ``email_verified``...) are kept as extra attributes.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: Optional[str] = None
    given_name: Optional[str] = Field(None, description="First name.")
    family_name: Optional[str] = Field(None, description="Last name.")
    email: Optional[str] = None
    picture: Optional[str] = Field(None, description="Profile photo URL.")

    @property
    def full_name(self) -> str:
        if self.name:
            return self.name
        return f"{self.given_name or ''} {self.family_name or ''}"

    @property
    def initials(self) -> str:
        return (self.given_name or "")[:1] + (self.family_name or "")[:1]


__all__ = ["LinkedInProfile"]
