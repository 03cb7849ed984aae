from urllib.parse import parse_qs, urlsplit

import httpx
import pytest

from twitch_kraken import AppInfo, TwitchClient


@pytest.fixture
def twitch_env(monkeypatch):
    monkeypatch.setenv("TWITCH_CLIENT_ID", "env_client_id")
    monkeypatch.setenv("TWITCH_CLIENT_SECRET", "env_secret")
    monkeypatch.setenv("TWITCH_STATE", "env_state")
    monkeypatch.setenv("TWITCH_REDIRECT_URI", "http://localhost/callback")
    monkeypatch.setenv("TWITCH_SCOPE", "user_read channel_read")


def test_app_info_reads_environment(twitch_env):
    app_info = AppInfo()

    assert app_info.client_id == "env_client_id"
    assert app_info.client_secret == "env_secret"
    assert app_info.state == "env_state"
    assert app_info.redirect_uri == "http://localhost/callback"
    assert app_info.scope == "user_read channel_read"


def test_explicit_values_win_over_environment(twitch_env):
    assert AppInfo(client_id="explicit").client_id == "explicit"
    assert AppInfo(client_id="").client_id == ""


def test_app_info_defaults_to_empty(monkeypatch):
    for name in ("CLIENT_ID", "CLIENT_SECRET", "STATE", "REDIRECT_URI", "SCOPE"):
        monkeypatch.delenv(f"TWITCH_{name}", raising=False)

    app_info = AppInfo(_env_file=None)

    assert app_info.model_dump() == {
        "client_id": "",
        "client_secret": "",
        "state": "",
        "redirect_uri": "",
        "scope": "",
    }


@pytest.mark.asyncio
async def test_authorize_url():
    app_info = AppInfo(
        client_id="abc", client_secret="secret", state="xyz", redirect_uri="http://localhost/callback", scope="user_read"
    )
    async with TwitchClient(app_info=app_info) as twitch:
        url = twitch.auth.authorize_url()

    parts = urlsplit(url)
    assert f"{parts.scheme}://{parts.netloc}{parts.path}" == "https://api.twitch.tv/kraken/oauth2/authorize"
    assert parse_qs(parts.query) == {
        "response_type": ["code"],
        "client_id": ["abc"],
        "redirect_uri": ["http://localhost/callback"],
        "scope": ["user_read"],
        "state": ["xyz"],
    }
    assert "secret" not in url


@pytest.mark.asyncio
async def test_authorize_url_skips_empty_values():
    app_info = AppInfo(client_id="abc", state="", redirect_uri="", scope="")

    async with TwitchClient(app_info=app_info) as twitch:
        url = twitch.auth.authorize_url()

    assert url == "https://api.twitch.tv/kraken/oauth2/authorize?response_type=code&client_id=abc"


@pytest.mark.asyncio
async def test_client_closes_only_its_own_http_client():
    owned = TwitchClient(app_info=AppInfo(client_id="abc"))
    async with owned:
        pass
    assert owned._httpx_client.is_closed

    async with httpx.AsyncClient() as http_client:
        async with TwitchClient(http_client, AppInfo(client_id="abc")):
            pass
        assert not http_client.is_closed
