from datetime import datetime
from typing import ClassVar

from pydantic import Field

from twitch_kraken.schemas.base import ZERO_TIME, TwitchModel


class Links(TwitchModel):
    """Model for the `_links` pagination block"""

    self_url: str = Field("", alias="self")
    next: str = ""


class ChannelLinks(TwitchModel):
    """Model for the `_links` block of a Twitch Channel"""

    self_url: str = Field("", alias="self")
    chat: str = ""
    commercial: str = ""
    videos: str = ""
    teams: str = ""
    editors: str = ""
    subscriptions: str = ""
    features: str = ""
    stream_key: str = ""
    follows: str = ""


class Team(TwitchModel):
    """Model for a Twitch Team"""

    id: int = Field(0, alias="_id")
    name: str = ""
    background: str = ""
    banner: str = ""
    logo: str = ""
    info: str = ""
    display_name: str = ""
    created_at: str = ""
    updated_at: str = ""


class Channel(TwitchModel):
    """Model for a Twitch Channel"""

    name: str = ""
    status: str = ""
    game: str = ""
    delay: int = 0
    id: int = Field(0, alias="_id")
    created_at: str = ""
    updated_at: str = ""
    primary_team_name: str = ""
    primary_team_display_name: str = ""
    teams: list[Team] = []
    title: str = ""
    mature: bool = False
    abuse_reported: bool = False
    banner: str = ""
    video_banner: str = ""
    views: int = 0
    followers: int = 0
    background: str = ""
    profile_banner: str = ""
    profile_banner_background_color: str = ""
    links: ChannelLinks = Field(ChannelLinks(), alias="_links")
    logo: str = ""
    url: str = ""
    display_name: str = ""
    language: str = ""
    broadcaster_language: str = ""

    # only present on the authenticated channel
    stream_key: str = ""
    login: str = ""
    email: str = ""


class Preview(TwitchModel):
    """Model for the preview images of a Twitch Stream"""

    small: str = ""
    medium: str = ""
    large: str = ""
    template: str = ""


class Stream(TwitchModel):
    """Model for a Twitch Stream"""

    always_emit: ClassVar[frozenset[str]] = frozenset({"is_playlist"})

    id: int = Field(0, alias="_id")
    game: str = ""
    preview: Preview = Preview()
    viewers: int = 0
    channel: Channel = Channel()
    video_height: int = 0
    average_fps: float = 0.0
    delay: int = 0
    broadcast_platform: str = ""
    community_id: str = ""
    community_ids: list[str] = []
    created_at: str = ""
    is_playlist: bool = False
    stream_type: str = ""


class User(TwitchModel):
    """Model for a Twitch User"""

    name: str = ""
    logo: str = ""
    id: int = Field(0, alias="_id")
    display_name: str = ""
    type: str = ""
    bio: str = ""
    created_at: datetime = ZERO_TIME
    updated_at: datetime = ZERO_TIME


class Video(TwitchModel):
    """Model for a Twitch Video"""

    always_emit: ClassVar[frozenset[str]] = frozenset({"broadcast_id"})

    title: str = ""
    id: str = Field("", alias="_id")
    embed: str = ""
    url: str = ""
    views: int = 0
    preview: str = ""
    length: int = 0
    description: str = ""
    broadcast_id: int = 0
    recorded_at: str = ""
    game: str = ""
    channel: Channel = Channel()


class FeaturedStream(TwitchModel):
    """Model for a featured Twitch Stream"""

    stream: Stream = Stream()
    text: str = ""
    image: str = ""
    title: str = ""
    sponsored: bool = False
    scheduled: bool = False
