from twitch_kraken.http import BaseURL
from twitch_kraken.methods.base import MethodGroup
from twitch_kraken.query import ListOptions, with_query
from twitch_kraken.schemas.search import SearchChannels, SearchGames, SearchStreams


class SearchMethod(MethodGroup):
    """Endpoints under /search. `query` is escaped, unlike path segments."""

    async def channels(self, query: str, opt: ListOptions | None = None) -> SearchChannels:
        path = with_query("search/channels", opt, query=query)
        return await self._http.get(BaseURL.PRIMARY, path, SearchChannels)

    async def streams(self, query: str, opt: ListOptions | None = None) -> SearchStreams:
        path = with_query("search/streams", opt, query=query)
        return await self._http.get(BaseURL.PRIMARY, path, SearchStreams)

    async def games(self, query: str, opt: ListOptions | None = None) -> SearchGames:
        """Searches games by name. Set `opt.live` to only return games being streamed."""
        path = with_query("search/games", opt, query=query, type="suggest")
        return await self._http.get(BaseURL.PRIMARY, path, SearchGames)
