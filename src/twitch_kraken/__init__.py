from loguru import logger

from twitch_kraken.client import TwitchClient
from twitch_kraken.errors import APIStatusError, InvalidRequestError, TwitchError
from twitch_kraken.http import BaseURL, HTTPClient
from twitch_kraken.query import ListOptions, M3U8Options
from twitch_kraken.settings import AppInfo

# library logs are opt-in: logger.enable("twitch_kraken")
logger.disable("twitch_kraken")

__all__ = (
    "APIStatusError",
    "AppInfo",
    "BaseURL",
    "HTTPClient",
    "InvalidRequestError",
    "ListOptions",
    "M3U8Options",
    "TwitchClient",
    "TwitchError",
)
