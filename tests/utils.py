import httpx
import orjson


class TrackingStream(httpx.AsyncByteStream):
    """Response body that remembers whether it was closed."""

    def __init__(self, content: bytes) -> None:
        self._content = content
        self.closed = False

    async def __aiter__(self):
        yield self._content

    async def aclose(self) -> None:
        self.closed = True


class FakeTwitch:
    """Serves one canned response to every request and records the requests.

    Plug `handler` into an `httpx.MockTransport`.
    """

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.streams: list[TrackingStream] = []
        self.status_code = 200
        self.content = b"{}"

    def reply(self, status_code: int = 200, json=None, content: bytes | None = None) -> None:
        self.status_code = status_code
        if json is not None:
            self.content = orjson.dumps(json)
        elif content is not None:
            self.content = content

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        stream = TrackingStream(self.content)
        self.streams.append(stream)
        return httpx.Response(self.status_code, stream=stream)

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def body_closed(self) -> bool:
        return self.streams[-1].closed
