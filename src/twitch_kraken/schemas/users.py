from pydantic import Field

from twitch_kraken.schemas.base import TwitchModel
from twitch_kraken.schemas.common import Channel, Links, User


class UserFollow(TwitchModel):
    """Model for a channel followed by a Twitch User"""

    created_at: str = ""
    notifications: bool = False
    channel: Channel = Channel()


class UserFollows(TwitchModel):
    """Model for GET /users/:user/follows/channels"""

    follows: list[UserFollow] = []
    total: int = Field(0, alias="_total")
    links: Links = Field(Links(), alias="_links")


class UserSubscription(TwitchModel):
    """Model for GET /users/:user/subscriptions/:channel"""

    id: str = Field("", alias="_id")
    created_at: str = ""
    channel: Channel = Channel()


class Block(TwitchModel):
    id: int = Field(0, alias="_id")
    updated_at: str = ""
    user: User = User()


class Blocks(TwitchModel):
    """Model for GET /users/:user/blocks"""

    blocks: list[Block] = []
    links: Links = Field(Links(), alias="_links")
