from pydantic import Field

from twitch_kraken.schemas.base import TwitchModel
from twitch_kraken.schemas.common import Links


class Ingest(TwitchModel):
    """Model for a Twitch ingest server"""

    id: int = Field(0, alias="_id")
    name: str = ""
    default: bool = False
    url_template: str = ""
    availability: float = 0.0


class Ingests(TwitchModel):
    """Model for GET /ingests"""

    ingests: list[Ingest] = []
    links: Links = Field(Links(), alias="_links")
