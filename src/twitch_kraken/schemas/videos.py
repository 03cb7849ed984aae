from pydantic import Field

from twitch_kraken.schemas.base import TwitchModel
from twitch_kraken.schemas.common import Links, Video


class TopVideos(TwitchModel):
    """Model for GET /videos/top and GET /videos/followed"""

    videos: list[Video] = []
    links: Links = Field(Links(), alias="_links")
