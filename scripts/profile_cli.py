"""Terminal front-end for the profile viewer.

Drives the same client flow as the browser page against a running backend,
keeping the access token in a small SQLite file instead of localStorage.

Example usages::

    python -m scripts.profile_cli login
    # approve on LinkedIn, then paste the URL you were redirected to:
    python -m scripts.profile_cli callback "http://localhost:3000/?code=...&state=..."
    python -m scripts.profile_cli show
    python -m scripts.profile_cli logout
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import webbrowser
from pathlib import Path

from app.core.config import get_settings
from app.core.logging import configure_logging
from app.viewer import (
    BackendClient,
    ClientConfig,
    Panel,
    ProfileFlowController,
    SQLiteTokenStore,
    load_config,
    render_text,
    start,
)

logger = logging.getLogger(__name__)

DEFAULT_TOKEN_DB = Path.home() / ".linkedin_viewer" / "tokens.db"
EXIT_OK = 0
EXIT_FLOW_ERROR = 1


class TerminalNavigator:
    """Print navigation targets and optionally open them in a browser."""

    def __init__(self, *, open_browser: bool = True) -> None:
        self._open_browser = open_browser

    def navigate(self, url: str) -> None:
        print(f"Open this URL to sign in with LinkedIn:\n  {url}")
        if self._open_browser:
            webbrowser.open(url)

    def replace_url(self, url: str) -> None:
        logger.debug("Visible location is now %s", url)


def _build_parser(default_backend: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="View your LinkedIn profile from a terminal.")
    parser.add_argument(
        "--backend-url",
        default=default_backend,
        help=f"Base URL of the running backend (default: {default_backend}).",
    )
    parser.add_argument(
        "--token-db",
        default=DEFAULT_TOKEN_DB,
        type=Path,
        help="SQLite file holding the stored access token.",
    )
    parser.add_argument(
        "--no-browser",
        action="store_true",
        help="Only print the authorization URL instead of opening it.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("show", help="Show the profile for the stored token.")
    subparsers.add_parser("login", help="Start the LinkedIn sign-in flow.")
    callback_parser = subparsers.add_parser(
        "callback", help="Finish sign-in using the URL LinkedIn redirected to."
    )
    callback_parser.add_argument("redirect_url")
    subparsers.add_parser("logout", help="Forget the stored token.")
    return parser


def _build_controller(
    args: argparse.Namespace, backend: BackendClient, config: ClientConfig
) -> ProfileFlowController:
    return ProfileFlowController(
        config=config,
        backend=backend,
        token_store=SQLiteTokenStore.at_path(str(args.token_db)),
        navigator=TerminalNavigator(open_browser=not args.no_browser),
    )


async def _login(args: argparse.Namespace) -> ProfileFlowController:
    # Any stored token is ignored; signing in always starts a fresh authorization.
    backend = BackendClient(args.backend_url)
    controller = _build_controller(args, backend, await load_config(backend))
    controller.initiate_login()
    return controller


async def _load(args: argparse.Namespace) -> ProfileFlowController:
    landing_url = args.redirect_url if args.command == "callback" else args.backend_url
    return await start(
        backend=BackendClient(args.backend_url),
        token_store=SQLiteTokenStore.at_path(str(args.token_db)),
        navigator=TerminalNavigator(open_browser=not args.no_browser),
        url=landing_url,
    )


def main(argv: list[str] | None = None) -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    parser = _build_parser(f"http://localhost:{settings.port}")
    args = parser.parse_args(argv)

    if args.command == "logout":
        controller = _build_controller(args, BackendClient(args.backend_url), ClientConfig())
        controller.logout()
    elif args.command == "login":
        controller = asyncio.run(_login(args))
        if controller.view.panel is not Panel.ERROR:
            return EXIT_OK
    else:
        controller = asyncio.run(_load(args))

    print(render_text(controller.state))
    return EXIT_FLOW_ERROR if controller.view.panel is Panel.ERROR else EXIT_OK


if __name__ == "__main__":  # pragma: no cover - script entry point
    sys.exit(main())
