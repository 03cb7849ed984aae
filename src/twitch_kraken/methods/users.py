from loguru import logger

from twitch_kraken.http import BaseURL
from twitch_kraken.methods.base import MethodGroup
from twitch_kraken.query import ListOptions, with_query
from twitch_kraken.schemas.common import User
from twitch_kraken.schemas.users import Blocks, UserFollow, UserFollows, UserSubscription


class UsersMethod(MethodGroup):
    """Endpoints under /users."""

    async def user(self, name: str = "") -> User:
        """Fetches a user, or the authenticated user when `name` is empty."""
        path = f"users/{name}" if name else "user"
        logger.debug(f"Fetching user {name or '(authenticated)'} from API")
        return await self._http.get(BaseURL.PRIMARY, path, User)

    async def follows(self, name: str, opt: ListOptions | None = None) -> UserFollows:
        """Fetches the channels user `name` follows. Honors `opt.direction`, `opt.limit` and `opt.offset`."""
        path = with_query(f"users/{name}/follows/channels", opt)
        return await self._http.get(BaseURL.PRIMARY, path, UserFollows)

    async def follow(self, name: str, channel: str) -> UserFollow:
        """Checks whether user `name` follows `channel`. Twitch answers 404 when not."""
        path = f"users/{name}/follows/channels/{channel}"
        return await self._http.get(BaseURL.PRIMARY, path, UserFollow)

    async def subscription(self, name: str, channel: str) -> UserSubscription:
        """Checks whether user `name` is subscribed to `channel`. Requires `user_subscriptions`."""
        path = f"users/{name}/subscriptions/{channel}"
        return await self._http.get(BaseURL.PRIMARY, path, UserSubscription)

    async def blocks(self, name: str, opt: ListOptions | None = None) -> Blocks:
        path = with_query(f"users/{name}/blocks", opt)
        return await self._http.get(BaseURL.PRIMARY, path, Blocks)
