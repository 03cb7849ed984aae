from contextlib import asynccontextmanager
from enum import Enum
from functools import lru_cache
from typing import Any, AsyncIterator, TypeVar
from urllib.parse import urljoin

import httpx
import orjson
from loguru import logger
from pydantic import TypeAdapter

from twitch_kraken.constants import (
    TWITCH_API_BASE_URL,
    TWITCH_JSON_MEDIA_TYPE,
    TWITCH_LEGACY_API_BASE_URL,
    TWITCH_USHER_BASE_URL,
)
from twitch_kraken.errors import APIStatusError, InvalidRequestError
from twitch_kraken.settings import AppInfo

T = TypeVar("T")

SUCCESS_STATUS_CODES = frozenset({httpx.codes.OK, httpx.codes.NOT_MODIFIED})


class BaseURL(Enum):
    """The hosts a request can be sent to."""

    PRIMARY = (TWITCH_API_BASE_URL, True)
    LEGACY = (TWITCH_LEGACY_API_BASE_URL, True)
    USHER = (TWITCH_USHER_BASE_URL, False)

    def __init__(self, url: str, returns_json: bool) -> None:
        self.url = url
        self.returns_json = returns_json


@lru_cache(maxsize=None)
def _adapter(model: Any) -> TypeAdapter:
    return TypeAdapter(model)


class HTTPClient:
    """Issues GET requests against the Twitch hosts and decodes the responses."""

    def __init__(self, http_client: httpx.AsyncClient, app_info: AppInfo, access_token: str = "") -> None:
        self._http_client = http_client
        self.app_info = app_info
        self.access_token = access_token

    @staticmethod
    def url_for(base: BaseURL, path: str) -> str:
        """Resolves `path` against the base URL, a leading `/` replaces the base path."""
        try:
            url = urljoin(base.url, path)
            httpx.URL(url)
        except (ValueError, httpx.InvalidURL) as e:
            raise InvalidRequestError(f"Invalid request path {path!r}: {e}") from e
        return url

    def headers_for(self, base: BaseURL) -> dict[str, str]:
        """Headers for `base`. The playlist host gets none, credentials stay on the API hosts."""
        if not base.returns_json:
            return {}
        headers = {"Accept": TWITCH_JSON_MEDIA_TYPE}
        if self.app_info.client_id:
            headers["Client-ID"] = self.app_info.client_id
        if self.access_token:
            headers["Authorization"] = f"OAuth {self.access_token}"
        return headers

    @asynccontextmanager
    async def _send(self, base: BaseURL, path: str) -> AsyncIterator[httpx.Response]:
        url = self.url_for(base, path)
        headers = self.headers_for(base)
        # query strings can carry playlist tokens
        log_url = url.split("?")[0]

        logger.debug(f"Making GET request to {log_url} with headers {sorted(headers)}")
        try:
            async with self._http_client.stream("GET", url, headers=headers) as response:
                logger.debug(f"GET request to {log_url} returned {response.status_code}")
                if response.status_code not in SUCCESS_STATUS_CODES:
                    raise APIStatusError(response.status_code, url)
                yield response
        except httpx.RequestError as e:
            logger.debug(f"Request to {log_url} failed: {e!r}")
            raise
        logger.debug(f"GET request to {log_url} took {response.elapsed}")

    async def get(self, base: BaseURL, path: str, model: type[T] | None = None) -> T | None:
        """Makes a GET request to a JSON host and decodes the body into `model`.

        `model` is anything pydantic can validate into, a model class or a type like
        `list[Panel]`. When it is None the body is discarded and None is returned.
        """
        if not base.returns_json:
            raise InvalidRequestError(f"{base.name} does not serve JSON, use get_text")

        async with self._send(base, path) as response:
            if model is None:
                return None
            content = await response.aread()

        try:
            return _adapter(model).validate_python(orjson.loads(content))
        except ValueError as e:
            logger.debug(f"Could not decode response of {path!r} into {model!r}: {e}")
            raise

    async def get_text(self, base: BaseURL, path: str) -> str:
        """Makes a GET request and returns the raw body as text."""
        async with self._send(base, path) as response:
            await response.aread()
            return response.text
