class TwitchError(Exception):
    """Base class for errors raised by this library."""


class InvalidRequestError(TwitchError, ValueError):
    """The request URL could not be built. Nothing was sent."""


class APIStatusError(TwitchError):
    """Twitch answered with a status other than 200 or 304.

    The response body is not inspected, the status code is the only diagnostic.
    """

    def __init__(self, status_code: int, url: str = "") -> None:
        self.status_code = status_code
        self.url = url
        super().__init__(f"api error, response code: {status_code}")
