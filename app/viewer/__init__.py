"""Client-side profile viewer flow."""

from .backend import BackendClient, BackendError
from .config import ClientConfig, ConfigurationError, load_config
from .flow import Navigator, ProfileFlowController, start
from .render import RenderedView, render, render_text
from .state import ErrorView, Loading, LoggedOut, Panel, ProfileView, ViewState
from .token_store import InMemoryTokenStore, SQLiteTokenStore, TokenStore

__all__ = [
    "BackendClient",
    "BackendError",
    "ClientConfig",
    "ConfigurationError",
    "ErrorView",
    "InMemoryTokenStore",
    "Loading",
    "LoggedOut",
    "Navigator",
    "Panel",
    "ProfileFlowController",
    "ProfileView",
    "RenderedView",
    "SQLiteTokenStore",
    "TokenStore",
    "ViewState",
    "load_config",
    "render",
    "render_text",
    "start",
]
