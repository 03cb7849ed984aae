from twitch_kraken.methods.auth import AuthMethods
from twitch_kraken.methods.channels import ChannelsMethod
from twitch_kraken.methods.chat import ChatMethod
from twitch_kraken.methods.games import GamesMethod
from twitch_kraken.methods.ingests import IngestsMethod
from twitch_kraken.methods.search import SearchMethod
from twitch_kraken.methods.streams import StreamsMethod
from twitch_kraken.methods.teams import TeamsMethod
from twitch_kraken.methods.users import UsersMethod
from twitch_kraken.methods.videos import VideosMethod

__all__ = (
    "AuthMethods",
    "ChannelsMethod",
    "ChatMethod",
    "GamesMethod",
    "IngestsMethod",
    "SearchMethod",
    "StreamsMethod",
    "TeamsMethod",
    "UsersMethod",
    "VideosMethod",
)
