from loguru import logger

from twitch_kraken.http import BaseURL
from twitch_kraken.methods.base import MethodGroup
from twitch_kraken.query import ListOptions, with_query
from twitch_kraken.schemas.streams import FeaturedStreams, StreamResponse, Streams, StreamsSummary


class StreamsMethod(MethodGroup):
    """Endpoints under /streams."""

    async def channel(self, name: str) -> StreamResponse:
        """Fetches the live stream of channel `name`. `stream` is None when offline."""
        logger.debug(f"Fetching stream of {name} from API")
        return await self._http.get(BaseURL.PRIMARY, f"streams/{name}", StreamResponse)

    async def list(self, opt: ListOptions | None = None) -> Streams:
        """Fetches live streams, filtered by `opt.game`, `opt.channel` and `opt.embeddable`."""
        return await self._http.get(BaseURL.PRIMARY, with_query("streams", opt), Streams)

    async def featured(self, opt: ListOptions | None = None) -> FeaturedStreams:
        return await self._http.get(BaseURL.PRIMARY, with_query("streams/featured", opt), FeaturedStreams)

    async def summary(self, opt: ListOptions | None = None) -> StreamsSummary:
        """Fetches the global viewer and channel counts, or those of `opt.game`."""
        return await self._http.get(BaseURL.PRIMARY, with_query("streams/summary", opt), StreamsSummary)

    async def followed(self, opt: ListOptions | None = None) -> Streams:
        """Fetches the live streams followed by the authenticated user. Requires `user_read`."""
        return await self._http.get(BaseURL.PRIMARY, with_query("streams/followed", opt), Streams)
