from pydantic import Field

from twitch_kraken.schemas.base import TwitchModel
from twitch_kraken.schemas.common import FeaturedStream, Links, Stream


class StreamResponse(TwitchModel):
    """Model for GET /streams/:channel

    `stream` is the zero `Stream` while the channel is offline.
    """

    stream: Stream = Stream()
    links: Links = Field(Links(), alias="_links")

    @property
    def live(self) -> bool:
        return self.stream.id != 0


class Streams(TwitchModel):
    """Model for GET /streams and GET /streams/followed"""

    total: int = Field(0, alias="_total")
    streams: list[Stream] = []
    links: Links = Field(Links(), alias="_links")


class FeaturedStreams(TwitchModel):
    """Model for GET /streams/featured"""

    featured: list[FeaturedStream] = []
    links: Links = Field(Links(), alias="_links")


class StreamsSummary(TwitchModel):
    """Model for GET /streams/summary"""

    viewers: int = 0
    channels: int = 0
    links: Links = Field(Links(), alias="_links")
