from typing import ClassVar

from pydantic import Field

from twitch_kraken.schemas.base import TwitchModel
from twitch_kraken.schemas.common import Links, Team, User, Video


class Videos(TwitchModel):
    """Model for GET /channels/:channel/videos"""

    videos: list[Video] = []
    links: Links = Field(Links(), alias="_links")


class Editors(TwitchModel):
    """Model for GET /channels/:channel/editors"""

    users: list[User] = []
    links: Links = Field(Links(), alias="_links")


class Follow(TwitchModel):
    """Model for a follower of a Twitch Channel"""

    created_at: str = ""
    notifications: bool = False
    user: User = User()


class Follows(TwitchModel):
    """Model for GET /channels/:channel/follows"""

    follows: list[Follow] = []
    total: int = Field(0, alias="_total")
    links: Links = Field(Links(), alias="_links")


class PanelData(TwitchModel):
    link: str = ""
    image: str = ""
    title: str = ""
    description: str = ""


class Panel(TwitchModel):
    """Model for a profile panel of a Twitch Channel"""

    id: int = Field(0, alias="_id")
    display_order: int = 0
    kind: str = ""
    html_description: str = ""
    user_id: int = 0
    data: PanelData = PanelData()
    channel: str = ""


class Subscription(TwitchModel):
    """Model for a subscriber of a Twitch Channel"""

    id: str = Field("", alias="_id")
    created_at: str = ""
    user: User = User()


class Subscriptions(TwitchModel):
    """Model for GET /channels/:channel/subscriptions"""

    total: int = Field(0, alias="_total")
    links: Links = Field(Links(), alias="_links")
    subscriptions: list[Subscription] = []


class Teams(TwitchModel):
    """Model for GET /channels/:channel/teams and GET /teams"""

    teams: list[Team] = []
    links: Links = Field(Links(), alias="_links")


class AccessToken(TwitchModel):
    """Model for the token used to sign usher playlist requests"""

    always_emit: ClassVar[frozenset[str]] = frozenset({"mobile_restricted"})

    sig: str = ""
    mobile_restricted: bool = False
    token: str = ""
