from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from loguru import logger
from utils import FakeTwitch

from twitch_kraken import AppInfo, TwitchClient

CLIENT_ID = "test_client_id"
ACCESS_TOKEN = "test_access_token"

FELPS_CHANNEL = {
    "_id": 30672329,
    "name": "felps",
    "display_name": "Felps",
    "status": "Just Chatting",
    "game": "Just Chatting",
    "mature": False,
    "followers": 4700000,
    "views": 120000000,
    "broadcaster_language": "pt",
    "logo": None,
    "_links": {
        "self": "https://api.twitch.tv/kraken/channels/felps",
        "follows": "https://api.twitch.tv/kraken/channels/felps/follows",
    },
}


@pytest.fixture
def caplog(caplog: pytest.LogCaptureFixture):
    logger.enable("twitch_kraken")
    handler_id = logger.add(caplog.handler, format="{message}", level=0)
    yield caplog
    logger.remove(handler_id)
    logger.disable("twitch_kraken")


@pytest.fixture
def fake_twitch() -> FakeTwitch:
    return FakeTwitch()


@pytest_asyncio.fixture
async def http_client(fake_twitch: FakeTwitch) -> AsyncGenerator[httpx.AsyncClient, None]:
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_twitch.handler)) as client:
        yield client


@pytest_asyncio.fixture
async def twitch(http_client: httpx.AsyncClient) -> AsyncGenerator[TwitchClient, None]:
    async with TwitchClient(http_client, AppInfo(client_id=CLIENT_ID), access_token=ACCESS_TOKEN) as client:
        yield client
