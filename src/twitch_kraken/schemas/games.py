from pydantic import Field

from twitch_kraken.schemas.base import TwitchModel
from twitch_kraken.schemas.common import Links


class Box(TwitchModel):
    """Model for the box art and logo URLs of a Twitch Game"""

    large: str = ""
    medium: str = ""
    small: str = ""
    template: str = ""


class Game(TwitchModel):
    """Model for a Twitch Game"""

    id: int = Field(0, alias="_id")
    name: str = ""
    box: Box = Box()
    logo: Box = Box()
    giantbomb_id: int = 0
    popularity: int = 0


class TopGame(TwitchModel):
    game: Game = Game()
    viewers: int = 0
    channels: int = 0


class TopGames(TwitchModel):
    """Model for GET /games/top"""

    total: int = Field(0, alias="_total")
    top: list[TopGame] = []
    links: Links = Field(Links(), alias="_links")
