from pydantic import Field

from twitch_kraken.schemas.base import TwitchModel
from twitch_kraken.schemas.common import Channel, Links, Stream
from twitch_kraken.schemas.games import Game


class SearchChannels(TwitchModel):
    """Model for GET /search/channels"""

    channels: list[Channel] = []
    total: int = Field(0, alias="_total")
    links: Links = Field(Links(), alias="_links")


class SearchStreams(TwitchModel):
    """Model for GET /search/streams"""

    streams: list[Stream] = []
    total: int = Field(0, alias="_total")
    links: Links = Field(Links(), alias="_links")


class SearchGames(TwitchModel):
    """Model for GET /search/games"""

    games: list[Game] = []
    links: Links = Field(Links(), alias="_links")
