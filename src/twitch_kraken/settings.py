from pydantic_settings import BaseSettings, SettingsConfigDict


class AppInfo(BaseSettings):
    """Application credentials used to talk to the Twitch API.

    Every field can be passed explicitly. Fields left out are read from the
    environment (``TWITCH_CLIENT_ID``, ``TWITCH_CLIENT_SECRET``, ``TWITCH_STATE``,
    ``TWITCH_REDIRECT_URI``, ``TWITCH_SCOPE``) or from a ``.env`` file, and
    default to an empty string. Empty values are never sent to Twitch.
    """

    model_config = SettingsConfigDict(env_prefix="TWITCH_", env_file=".env", extra="ignore", frozen=True)

    client_id: str = ""
    client_secret: str = ""
    state: str = ""
    redirect_uri: str = ""
    scope: str = ""
