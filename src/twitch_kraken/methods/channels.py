import random

from loguru import logger

from twitch_kraken.constants import USHER_PLAYER, USHER_STREAM_TYPE
from twitch_kraken.http import BaseURL
from twitch_kraken.methods.base import MethodGroup
from twitch_kraken.query import ListOptions, M3U8Options, with_query
from twitch_kraken.schemas.channels import (
    AccessToken,
    Editors,
    Follows,
    Panel,
    Subscription,
    Subscriptions,
    Teams,
    Videos,
)
from twitch_kraken.schemas.common import Channel


class ChannelsMethod(MethodGroup):
    """Endpoints under /channels."""

    async def channel(self, name: str = "") -> Channel:
        """Fetches a channel, or the authenticated user's channel when `name` is empty."""
        path = f"channels/{name}" if name else "channel"
        logger.debug(f"Fetching channel {name or '(authenticated)'} from API")
        return await self._http.get(BaseURL.PRIMARY, path, Channel)

    async def editors(self, name: str) -> Editors:
        """Fetches the users allowed to edit channel `name`. Requires `channel_read`."""
        return await self._http.get(BaseURL.PRIMARY, f"channels/{name}/editors", Editors)

    async def videos(self, name: str, opt: ListOptions | None = None) -> Videos:
        """Fetches the videos of channel `name`, most recent first."""
        path = with_query(f"channels/{name}/videos", opt)
        return await self._http.get(BaseURL.PRIMARY, path, Videos)

    async def follows(self, name: str, opt: ListOptions | None = None) -> Follows:
        """Fetches the users following channel `name`."""
        path = with_query(f"channels/{name}/follows", opt)
        return await self._http.get(BaseURL.PRIMARY, path, Follows)

    async def teams(self, name: str) -> Teams:
        return await self._http.get(BaseURL.PRIMARY, f"channels/{name}/teams", Teams)

    async def panels(self, name: str, opt: ListOptions | None = None) -> list[Panel]:
        """Fetches the profile panels of channel `name` from the legacy API."""
        path = with_query(f"channels/{name}/panels", opt)
        return await self._http.get(BaseURL.LEGACY, path, list[Panel])

    async def access_token(self, name: str) -> AccessToken:
        """Fetches the token and signature needed to request the playlist of `name`."""
        return await self._http.get(BaseURL.LEGACY, f"channels/{name}/access_token", AccessToken)

    async def m3u8(self, name: str, opt: M3U8Options | None = None) -> str:
        """Fetches the HLS master playlist of channel `name` as text.

        Only `token` and `sig` of `opt` are used. The fields in
        `M3U8Options.FORCED_FIELDS` are always sent as `player=twitchweb`,
        `$allow_audio_only=true`, `allow_source=true`, `type=any` and a random `p`,
        whatever the caller set. Without `opt` no query string is sent.
        """
        path = f"channel/hls/{name}.m3u8"
        if opt is not None:
            opt = opt.model_copy(
                update={
                    "player": USHER_PLAYER,
                    "allow_audio_only": True,
                    "allow_source": True,
                    "type": USHER_STREAM_TYPE,
                    "random": random.getrandbits(63),
                }
            )
            path = with_query(path, opt)

        logger.debug(f"Fetching playlist of {name} from usher")
        return await self._http.get_text(BaseURL.USHER, path)

    async def subscriptions(self, name: str, opt: ListOptions | None = None) -> Subscriptions:
        """Fetches the subscribers of channel `name`. Requires `channel_subscriptions`."""
        path = with_query(f"channels/{name}/subscriptions", opt)
        return await self._http.get(BaseURL.PRIMARY, path, Subscriptions)

    async def subscription(self, name: str, user: str) -> Subscription:
        """Checks whether `user` is subscribed to channel `name`."""
        return await self._http.get(BaseURL.PRIMARY, f"channels/{name}/subscriptions/{user}", Subscription)
