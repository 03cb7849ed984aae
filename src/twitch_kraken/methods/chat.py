from twitch_kraken.http import BaseURL
from twitch_kraken.methods.base import MethodGroup
from twitch_kraken.schemas.chat import Badges, ChatChannel, Emoticons


class ChatMethod(MethodGroup):
    """Endpoints under /chat."""

    async def links(self, channel: str) -> ChatChannel:
        return await self._http.get(BaseURL.PRIMARY, f"chat/{channel}", ChatChannel)

    async def badges(self, channel: str) -> Badges:
        """Fetches the chat badges shown in `channel`."""
        return await self._http.get(BaseURL.PRIMARY, f"chat/{channel}/badges", Badges)

    async def emoticons(self) -> Emoticons:
        """Fetches every emoticon available on Twitch. The response is large."""
        return await self._http.get(BaseURL.PRIMARY, "chat/emoticons", Emoticons)
