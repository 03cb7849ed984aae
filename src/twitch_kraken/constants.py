TWITCH_API_BASE_URL = "https://api.twitch.tv/kraken/"
TWITCH_LEGACY_API_BASE_URL = "https://api.twitch.tv/api/"
TWITCH_USHER_BASE_URL = "https://usher.ttvnw.net/api/"
TWITCH_OAUTH_AUTHORIZE_URL = "https://api.twitch.tv/kraken/oauth2/authorize"

TWITCH_JSON_MEDIA_TYPE = "application/vnd.twitchtv.v2+json"

# player id the usher service expects from the web player
USHER_PLAYER = "twitchweb"
USHER_STREAM_TYPE = "any"
