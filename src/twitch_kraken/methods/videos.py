from twitch_kraken.http import BaseURL
from twitch_kraken.methods.base import MethodGroup
from twitch_kraken.query import ListOptions, with_query
from twitch_kraken.schemas.common import Video
from twitch_kraken.schemas.videos import TopVideos


class VideosMethod(MethodGroup):
    """Endpoints under /videos."""

    async def video(self, id: str) -> Video:
        return await self._http.get(BaseURL.PRIMARY, f"videos/{id}", Video)

    async def top(self, opt: ListOptions | None = None) -> TopVideos:
        """Fetches the most viewed videos, filtered by `opt.game` and `opt.period`."""
        return await self._http.get(BaseURL.PRIMARY, with_query("videos/top", opt), TopVideos)

    async def followed(self, opt: ListOptions | None = None) -> TopVideos:
        """Fetches the videos of the channels the authenticated user follows."""
        return await self._http.get(BaseURL.PRIMARY, with_query("videos/followed", opt), TopVideos)
