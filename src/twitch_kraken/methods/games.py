from twitch_kraken.http import BaseURL
from twitch_kraken.methods.base import MethodGroup
from twitch_kraken.query import ListOptions, with_query
from twitch_kraken.schemas.games import TopGames


class GamesMethod(MethodGroup):
    async def top(self, opt: ListOptions | None = None) -> TopGames:
        """Fetches the games sorted by number of current viewers."""
        return await self._http.get(BaseURL.PRIMARY, with_query("games/top", opt), TopGames)
