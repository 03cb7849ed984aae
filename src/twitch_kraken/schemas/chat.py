from pydantic import Field

from twitch_kraken.schemas.base import TwitchModel
from twitch_kraken.schemas.common import Links


class ChatLinks(TwitchModel):
    emoticons: str = ""
    badges: str = ""


class ChatChannel(TwitchModel):
    """Model for GET /chat/:channel"""

    links: ChatLinks = Field(ChatLinks(), alias="_links")


class Badge(TwitchModel):
    """Model for a chat badge image set"""

    alpha: str = ""
    image: str = ""
    svg: str = ""


class Badges(TwitchModel):
    """Model for GET /chat/:channel/badges"""

    global_mod: Badge = Badge()
    admin: Badge = Badge()
    broadcaster: Badge = Badge()
    mod: Badge = Badge()
    staff: Badge = Badge()
    turbo: Badge = Badge()
    subscriber: Badge = Badge()
    links: Links = Field(Links(), alias="_links")


class EmoticonImage(TwitchModel):
    emoticon_set: int = 0
    height: int = 0
    width: int = 0
    url: str = ""


class Emoticon(TwitchModel):
    regex: str = ""
    images: list[EmoticonImage] = []


class Emoticons(TwitchModel):
    """Model for GET /chat/emoticons"""

    emoticons: list[Emoticon] = []
    links: Links = Field(Links(), alias="_links")
