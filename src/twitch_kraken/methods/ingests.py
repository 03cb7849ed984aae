from twitch_kraken.http import BaseURL
from twitch_kraken.methods.base import MethodGroup
from twitch_kraken.schemas.ingests import Ingests


class IngestsMethod(MethodGroup):
    async def list(self) -> Ingests:
        """Fetches the ingest servers a broadcaster can stream to."""
        return await self._http.get(BaseURL.PRIMARY, "ingests", Ingests)
