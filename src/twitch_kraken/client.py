import httpx
from loguru import logger

from twitch_kraken.http import HTTPClient
from twitch_kraken.methods import (
    AuthMethods,
    ChannelsMethod,
    ChatMethod,
    GamesMethod,
    IngestsMethod,
    SearchMethod,
    StreamsMethod,
    TeamsMethod,
    UsersMethod,
    VideosMethod,
)
from twitch_kraken.settings import AppInfo


class TwitchClient:
    """A client for the Twitch kraken API.

    `http_client` is used as is, with its own timeouts and limits. When it is not
    given, one is created and closed by `aclose`. `app_info` defaults to the
    values found in the environment.

    Usage::

        async with TwitchClient(app_info=AppInfo(client_id="...")) as twitch:
            channel = await twitch.channels.channel("somebody")
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        app_info: AppInfo | None = None,
        access_token: str = "",
    ) -> None:
        self._owns_http_client = http_client is None
        self._httpx_client = http_client or httpx.AsyncClient()
        self.http = HTTPClient(self._httpx_client, app_info or AppInfo(), access_token)

        self.channels = ChannelsMethod(self.http)
        self.chat = ChatMethod(self.http)
        self.games = GamesMethod(self.http)
        self.ingests = IngestsMethod(self.http)
        self.search = SearchMethod(self.http)
        self.streams = StreamsMethod(self.http)
        self.teams = TeamsMethod(self.http)
        self.users = UsersMethod(self.http)
        self.videos = VideosMethod(self.http)
        self.auth = AuthMethods(self.http)

    @property
    def app_info(self) -> AppInfo:
        return self.http.app_info

    @property
    def access_token(self) -> str:
        return self.http.access_token

    @access_token.setter
    def access_token(self, value: str) -> None:
        self.http.access_token = value

    async def aclose(self) -> None:
        if self._owns_http_client:
            logger.info("Shutting down HTTPX Twitch client")
            await self._httpx_client.aclose()

    async def __aenter__(self) -> "TwitchClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
