"""View states the profile viewer can be in."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from app.schemas import LinkedInProfile


class Panel(str, Enum):
    LOGIN = "login"
    LOADING = "loading"
    PROFILE = "profile"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class LoggedOut:
    panel = Panel.LOGIN


@dataclass(frozen=True, slots=True)
class Loading:
    panel = Panel.LOADING


@dataclass(frozen=True, slots=True)
class ProfileView:
    profile: LinkedInProfile
    panel = Panel.PROFILE


@dataclass(frozen=True, slots=True)
class ErrorView:
    message: str
    panel = Panel.ERROR


ViewState = Union[LoggedOut, Loading, ProfileView, ErrorView]

__all__ = [
    "ErrorView",
    "LoggedOut",
    "Loading",
    "Panel",
    "ProfileView",
    "ViewState",
]
