from urllib.parse import urlencode

from twitch_kraken.constants import TWITCH_OAUTH_AUTHORIZE_URL
from twitch_kraken.methods.base import MethodGroup


class AuthMethods(MethodGroup):
    """OAuth helpers. Exchanging the authorization code is left to the caller."""

    def authorize_url(self) -> str:
        """Builds the URL users are sent to in order to grant access to the application."""
        app_info = self._http.app_info
        params = {
            "response_type": "code",
            "client_id": app_info.client_id,
            "redirect_uri": app_info.redirect_uri,
            "scope": app_info.scope,
            "state": app_info.state,
        }
        return f"{TWITCH_OAUTH_AUTHORIZE_URL}?{urlencode({k: v for k, v in params.items() if v})}"

    def set_access_token(self, access_token: str) -> None:
        """Uses `access_token` for every following request. An empty string stops sending it."""
        self._http.access_token = access_token
