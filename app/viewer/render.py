"""
Pure rendering of a view state into what the page should show.

``render`` never touches I/O; the browser shell and the terminal client both
consume the ``RenderedView`` it returns.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict
from urllib.parse import quote

from app.viewer.state import ErrorView, Panel, ProfileView, ViewState

PLACEHOLDER_PHOTO_URL = "https://via.placeholder.com/200x200/0077b5/white?text="
EMAIL_UNAVAILABLE = "Email not available"


@dataclass(frozen=True)
class RenderedView:
    """The single visible panel plus its text bindings."""

    panel: Panel
    bindings: Dict[str, str] = field(default_factory=dict)


def profile_bindings(view: ProfileView) -> Dict[str, str]:
    profile = view.profile
    return {
        "profile-photo": profile.picture
        or PLACEHOLDER_PHOTO_URL + quote(profile.initials),
        "profile-name": profile.full_name,
        "profile-email": profile.email or EMAIL_UNAVAILABLE,
    }


def render(state: ViewState) -> RenderedView:
    if isinstance(state, ProfileView):
        return RenderedView(panel=state.panel, bindings=profile_bindings(state))
    if isinstance(state, ErrorView):
        return RenderedView(panel=state.panel, bindings={"error-text": state.message})
    return RenderedView(panel=state.panel)


def render_text(state: ViewState) -> str:
    """Plain-text rendering used by the terminal client."""
    view = render(state)
    if view.panel is Panel.LOGIN:
        return "Not signed in. Run the 'login' command to sign in with LinkedIn."
    if view.panel is Panel.LOADING:
        return "Loading..."
    if view.panel is Panel.ERROR:
        return f"Error: {view.bindings['error-text']}"
    return "\n".join(
        [
            f"Name:  {view.bindings['profile-name']}",
            f"Email: {view.bindings['profile-email']}",
            f"Photo: {view.bindings['profile-photo']}",
        ]
    )


__all__ = ["RenderedView", "render", "render_text"]
