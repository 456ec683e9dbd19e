try:
    from . import _bootstrap  # noqa: F401
except Exception:  # pragma: no cover - fallback for direct execution
    import _bootstrap  # type: ignore # noqa: F401

from urllib.parse import parse_qs, urlsplit

import pytest

from app.schemas import LinkedInProfile, PublicConfig
from app.viewer import (
    BackendError,
    ClientConfig,
    ErrorView,
    InMemoryTokenStore,
    Loading,
    LoggedOut,
    Panel,
    ProfileFlowController,
    ProfileView,
    start,
)
from app.viewer.flow import UNEXPECTED_ERROR


class FakeBackend:
    def __init__(self) -> None:
        self.calls: list[tuple] = []
        self.config = PublicConfig(client_id="client-123", redirect_uri="http://localhost:3000")
        self.config_error: Exception | None = None
        self.access_token = "token-from-exchange"
        self.exchange_error: Exception | None = None
        self.profile = LinkedInProfile(name="Ada Lovelace", email="ada@example.com")
        self.profile_error: Exception | None = None

    async def get_config(self) -> PublicConfig:
        self.calls.append(("config",))
        if self.config_error:
            raise self.config_error
        return self.config

    async def exchange_code(self, code: str) -> str:
        self.calls.append(("token", code))
        if self.exchange_error:
            raise self.exchange_error
        return self.access_token

    async def fetch_profile(self, access_token: str) -> LinkedInProfile:
        self.calls.append(("profile", access_token))
        if self.profile_error:
            raise self.profile_error
        return self.profile


class RecordingNavigator:
    def __init__(self) -> None:
        self.visited: list[str] = []
        self.replaced: list[str] = []

    def navigate(self, url: str) -> None:
        self.visited.append(url)

    def replace_url(self, url: str) -> None:
        self.replaced.append(url)


async def _start(backend, store, navigator, url="http://localhost:3000/"):
    return await start(backend=backend, token_store=store, navigator=navigator, url=url)


@pytest.mark.anyio
async def test_error_parameter_shows_error_without_exchange():
    backend = FakeBackend()
    controller = await _start(
        backend,
        InMemoryTokenStore(),
        RecordingNavigator(),
        url="http://localhost:3000/?error=user_cancelled_login&state=linkedin_oauth_x",
    )

    assert isinstance(controller.state, ErrorView)
    assert "user_cancelled_login" in controller.state.message
    assert backend.calls == [("config",)]


@pytest.mark.anyio
async def test_code_and_state_exchange_once_then_fetch_profile():
    backend = FakeBackend()
    store = InMemoryTokenStore()
    navigator = RecordingNavigator()

    controller = await _start(
        backend,
        store,
        navigator,
        url="http://localhost:3000/welcome?code=auth-code&state=linkedin_oauth_abc",
    )

    assert backend.calls == [
        ("config",),
        ("token", "auth-code"),
        ("profile", "token-from-exchange"),
    ]
    assert navigator.replaced == ["/welcome"]
    assert store.get() == "token-from-exchange"
    assert isinstance(controller.state, ProfileView)
    assert controller.view.panel is Panel.PROFILE


@pytest.mark.anyio
async def test_no_params_and_no_token_shows_login_prompt():
    backend = FakeBackend()
    controller = await _start(backend, InMemoryTokenStore(), RecordingNavigator())

    assert controller.state == LoggedOut()
    assert backend.calls == [("config",)]


@pytest.mark.anyio
async def test_stored_token_fetches_profile_without_exchange():
    backend = FakeBackend()
    controller = await _start(
        backend, InMemoryTokenStore("stored-token"), RecordingNavigator()
    )

    assert backend.calls == [("config",), ("profile", "stored-token")]
    assert isinstance(controller.state, ProfileView)


@pytest.mark.anyio
async def test_code_without_state_is_not_exchanged():
    backend = FakeBackend()
    controller = await _start(
        backend,
        InMemoryTokenStore(),
        RecordingNavigator(),
        url="http://localhost:3000/?code=auth-code",
    )

    assert controller.state == LoggedOut()
    assert backend.calls == [("config",)]


@pytest.mark.anyio
async def test_logout_clears_token_so_next_load_shows_login():
    backend = FakeBackend()
    store = InMemoryTokenStore("stored-token")
    controller = await _start(backend, store, RecordingNavigator())
    assert isinstance(controller.state, ProfileView)

    assert controller.logout() == LoggedOut()
    assert store.get() is None

    backend.calls.clear()
    reloaded = await _start(backend, store, RecordingNavigator())
    assert reloaded.state == LoggedOut()
    assert backend.calls == [("config",)]


@pytest.mark.anyio
async def test_exchange_failure_shows_backend_error_text():
    backend = FakeBackend()
    backend.exchange_error = BackendError(
        "POST /api/linkedin/token returned 500",
        detail="Failed to exchange code for token",
        status_code=500,
    )
    store = InMemoryTokenStore()

    controller = await _start(
        backend, store, RecordingNavigator(), url="http://localhost:3000/?code=c&state=s"
    )

    assert controller.state == ErrorView(
        "Authentication failed: Failed to exchange code for token"
    )
    assert store.get() is None
    assert ("profile", "token-from-exchange") not in backend.calls


@pytest.mark.anyio
async def test_transport_failure_uses_generic_message():
    backend = FakeBackend()
    backend.profile_error = BackendError("GET /api/linkedin/profile failed: refused")

    controller = await _start(backend, InMemoryTokenStore("t"), RecordingNavigator())

    assert controller.state == ErrorView("Failed to load profile: Failed to fetch profile data")


@pytest.mark.anyio
async def test_unexpected_failure_is_caught_by_global_handler():
    backend = FakeBackend()
    backend.profile_error = RuntimeError("boom")

    controller = await _start(backend, InMemoryTokenStore("t"), RecordingNavigator())

    assert controller.state == ErrorView(UNEXPECTED_ERROR)


@pytest.mark.anyio
async def test_unavailable_config_disables_login():
    backend = FakeBackend()
    backend.config_error = BackendError("GET /api/linkedin/config failed: refused")
    navigator = RecordingNavigator()

    controller = await _start(backend, InMemoryTokenStore(), navigator)
    assert controller.state == LoggedOut()
    assert not controller.config.login_enabled

    assert controller.initiate_login() is None
    assert isinstance(controller.state, ErrorView)
    assert "Client ID not configured" in controller.state.message
    assert navigator.visited == []


@pytest.mark.anyio
async def test_initiate_login_navigates_to_authorization_url():
    backend = FakeBackend()
    navigator = RecordingNavigator()
    controller = await _start(backend, InMemoryTokenStore(), navigator)

    url = controller.initiate_login()

    assert navigator.visited == [url]
    parts = urlsplit(url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == (
        "https://www.linkedin.com/oauth/v2/authorization"
    )
    query = parse_qs(parts.query)
    assert query == {
        "response_type": ["code"],
        "client_id": ["client-123"],
        "redirect_uri": ["http://localhost:3000"],
        "scope": ["openid profile email"],
        "state": [controller.config.state],
    }
    assert controller.config.state.startswith("linkedin_oauth_")


def test_retry_returns_to_login_prompt():
    controller = ProfileFlowController(
        config=ClientConfig(client_id="client-123"),
        backend=FakeBackend(),
        token_store=InMemoryTokenStore(),
        navigator=RecordingNavigator(),
    )
    assert controller.state == Loading()
    controller.show_error("LinkedIn authentication failed: access_denied")

    assert controller.retry() == LoggedOut()
    assert controller.view.panel is Panel.LOGIN


def test_each_config_gets_its_own_state():
    assert ClientConfig().state != ClientConfig().state


class BrokenStore(InMemoryTokenStore):
    def clear(self) -> None:
        raise OSError("disk I/O error")


class BrokenNavigator(RecordingNavigator):
    def navigate(self, url: str) -> None:
        raise RuntimeError("no browser available")


@pytest.mark.anyio
async def test_logout_failure_is_caught_by_global_handler():
    controller = await _start(FakeBackend(), BrokenStore(), RecordingNavigator())

    assert controller.logout() == ErrorView(UNEXPECTED_ERROR)
    assert controller.view.panel is Panel.ERROR


@pytest.mark.anyio
async def test_login_navigation_failure_is_caught_by_global_handler():
    controller = await _start(FakeBackend(), InMemoryTokenStore(), BrokenNavigator())

    assert controller.initiate_login() is None
    assert controller.state == ErrorView(UNEXPECTED_ERROR)
