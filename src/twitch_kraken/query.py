from typing import Any, ClassVar
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field


def _format(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class QueryOptions(BaseModel):
    """Request options serialized into a query string.

    A field is left out of the query while it holds its default value, unless its
    name is listed in `always_send`. Field aliases are the query parameter names.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    always_send: ClassVar[frozenset[str]] = frozenset()

    def params(self) -> dict[str, str]:
        params = {}
        for name, field in type(self).model_fields.items():
            value = getattr(self, name)
            if value == field.default and name not in self.always_send:
                continue
            params[field.alias or name] = _format(value)
        return params

    def to_query(self) -> str:
        """Encodes the options with the keys sorted, `$` and other reserved characters escaped."""
        return urlencode(sorted(self.params().items()))


class ListOptions(QueryOptions):
    """Paging and filtering options shared by the list endpoints.

    `embeddable`, `hls` and `live` are only sent when set, `False` included.
    """

    game: str = ""
    channel: str = ""
    direction: str = ""
    period: str = ""
    limit: int = 0
    offset: int = 0
    embeddable: bool | None = None
    hls: bool | None = None
    live: bool | None = None


class M3U8Options(QueryOptions):
    """Options of the usher playlist request.

    Only `token` and `sig` are honored. `ChannelsMethod.m3u8` always replaces the
    fields listed in `FORCED_FIELDS` with the values the usher service expects.
    """

    always_send: ClassVar[frozenset[str]] = frozenset({"allow_audio_only", "allow_source"})
    FORCED_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"player", "allow_audio_only", "allow_source", "type", "random"}
    )

    token: str = ""
    sig: str = ""
    player: str = ""
    allow_audio_only: bool = Field(False, alias="$allow_audio_only")
    allow_source: bool = False
    type: str = ""
    random: int = Field(0, alias="p")


def with_query(path: str, options: QueryOptions | None = None, **extra: Any) -> str:
    """Appends `options` and the non-None `extra` parameters to `path` as a query string."""
    params = {key: _format(value) for key, value in extra.items() if value is not None}
    if options is not None:
        params.update(options.params())
    if not params and options is None:
        return path
    return f"{path}?{urlencode(sorted(params.items()))}"
