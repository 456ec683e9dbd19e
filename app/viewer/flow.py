"""
Client-side OAuth flow for the profile viewer.

The controller walks a user through the LinkedIn authorization-code handshake
against the backend proxy and keeps the resulting view state. It never sees
the client secret: codes are redeemed by the backend, and only the opaque
access token is kept, in a ``TokenStore``.
"""

from __future__ import annotations

import logging
from typing import Optional, Protocol
from urllib.parse import parse_qs, urlsplit

from app.viewer.backend import BackendClient, BackendError
from app.viewer.config import ClientConfig, ConfigurationError, load_config
from app.viewer.render import RenderedView, render
from app.viewer.state import ErrorView, Loading, LoggedOut, ProfileView, ViewState
from app.viewer.token_store import TokenStore

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again."


class Navigator(Protocol):
    """Where the viewer sends the user, e.g. a browser window."""

    def navigate(self, url: str) -> None:
        ...

    def replace_url(self, url: str) -> None:
        ...


def _first(params: dict[str, list[str]], name: str) -> Optional[str]:
    values = params.get(name)
    return values[0] if values else None


class ProfileFlowController:
    """Drive the viewer through login, code exchange and profile display."""

    def __init__(
        self,
        *,
        config: ClientConfig,
        backend: BackendClient,
        token_store: TokenStore,
        navigator: Navigator,
    ) -> None:
        self.config = config
        self._backend = backend
        self._tokens = token_store
        self._navigator = navigator
        self.state: ViewState = Loading()

    @property
    def view(self) -> RenderedView:
        return render(self.state)

    def _show(self, state: ViewState) -> ViewState:
        self.state = state
        return state

    def show_error(self, message: str) -> ViewState:
        return self._show(ErrorView(message))

    async def run(self, url: str) -> ViewState:
        """Handle a page load, turning any unexpected failure into the error view."""
        try:
            return await self.check_for_auth_code(url)
        except Exception:  # pylint: disable=broad-except
            logger.exception("Application error")
            return self.show_error(UNEXPECTED_ERROR)

    async def check_for_auth_code(self, url: str) -> ViewState:
        """Inspect the landing URL for an OAuth error, a code, or neither."""
        parts = urlsplit(url)
        params = parse_qs(parts.query)

        error = _first(params, "error")
        if error:
            return self.show_error(f"LinkedIn authentication failed: {error}")

        code = _first(params, "code")
        state = _first(params, "state")
        if code and state:
            # The returned state is not checked against self.config.state.
            self._navigator.replace_url(parts.path or "/")
            self._show(Loading())
            return await self.exchange_code(code)

        stored_token = self._tokens.get()
        if stored_token:
            self._show(Loading())
            return await self.fetch_profile(stored_token)
        return self._show(LoggedOut())

    def initiate_login(self) -> Optional[str]:
        """Send the user to LinkedIn's consent page; returns the URL used."""
        try:
            url = self.config.authorization_request_url()
            self._navigator.navigate(url)
        except ConfigurationError as exc:
            self.show_error(str(exc))
            return None
        except Exception:  # pylint: disable=broad-except
            logger.exception("Login error")
            self.show_error(UNEXPECTED_ERROR)
            return None
        return url

    async def exchange_code(self, code: str) -> ViewState:
        try:
            access_token = await self._backend.exchange_code(code)
        except BackendError as exc:
            logger.error("Token exchange error: %s", exc)
            reason = exc.detail or "Failed to exchange code for token"
            return self.show_error(f"Authentication failed: {reason}")

        self._tokens.set(access_token)
        return await self.fetch_profile(access_token)

    async def fetch_profile(self, access_token: str) -> ViewState:
        try:
            profile = await self._backend.fetch_profile(access_token)
        except BackendError as exc:
            logger.error("Profile fetch error: %s", exc)
            reason = exc.detail or "Failed to fetch profile data"
            return self.show_error(f"Failed to load profile: {reason}")
        return self._show(ProfileView(profile))

    def logout(self) -> ViewState:
        try:
            self._tokens.clear()
        except Exception:  # pylint: disable=broad-except
            logger.exception("Logout error")
            return self.show_error(UNEXPECTED_ERROR)
        return self._show(LoggedOut())

    def retry(self) -> ViewState:
        return self._show(LoggedOut())


async def start(
    *,
    backend: BackendClient,
    token_store: TokenStore,
    navigator: Navigator,
    url: str,
) -> ProfileFlowController:
    """Load config once, build the controller and handle the landing URL."""
    config = await load_config(backend)
    controller = ProfileFlowController(
        config=config,
        backend=backend,
        token_store=token_store,
        navigator=navigator,
    )
    await controller.run(url)
    return controller


__all__ = ["Navigator", "ProfileFlowController", "UNEXPECTED_ERROR", "start"]
