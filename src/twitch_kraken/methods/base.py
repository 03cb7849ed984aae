from twitch_kraken.http import HTTPClient


class MethodGroup:
    """A namespace of endpoints sharing one `HTTPClient`."""

    def __init__(self, http: HTTPClient) -> None:
        self._http = http
