from twitch_kraken.schemas.base import ZERO_TIME, TwitchModel
from twitch_kraken.schemas.channels import (
    AccessToken,
    Editors,
    Follow,
    Follows,
    Panel,
    PanelData,
    Subscription,
    Subscriptions,
    Teams,
    Videos,
)
from twitch_kraken.schemas.chat import Badge, Badges, ChatChannel, ChatLinks, Emoticon, EmoticonImage, Emoticons
from twitch_kraken.schemas.common import (
    Channel,
    ChannelLinks,
    FeaturedStream,
    Links,
    Preview,
    Stream,
    Team,
    User,
    Video,
)
from twitch_kraken.schemas.games import Box, Game, TopGame, TopGames
from twitch_kraken.schemas.ingests import Ingest, Ingests
from twitch_kraken.schemas.search import SearchChannels, SearchGames, SearchStreams
from twitch_kraken.schemas.streams import FeaturedStreams, StreamResponse, Streams, StreamsSummary
from twitch_kraken.schemas.users import Block, Blocks, UserFollow, UserFollows, UserSubscription
from twitch_kraken.schemas.videos import TopVideos
