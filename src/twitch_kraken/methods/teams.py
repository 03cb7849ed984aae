from twitch_kraken.http import BaseURL
from twitch_kraken.methods.base import MethodGroup
from twitch_kraken.query import ListOptions, with_query
from twitch_kraken.schemas.channels import Teams
from twitch_kraken.schemas.common import Team


class TeamsMethod(MethodGroup):
    async def list(self, opt: ListOptions | None = None) -> Teams:
        return await self._http.get(BaseURL.PRIMARY, with_query("teams", opt), Teams)

    async def team(self, name: str) -> Team:
        return await self._http.get(BaseURL.PRIMARY, f"teams/{name}", Team)
