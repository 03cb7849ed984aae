from datetime import datetime, timezone
from typing import Any, ClassVar, get_args

import orjson
from pydantic import BaseModel, ConfigDict, model_validator

# zero value of a timestamp, stands in for a missing one
ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


class TwitchModel(BaseModel):
    """Immutable snapshot of a Twitch API payload.

    Missing keys and `null` values, list items included, decode to the zero value
    of their type. When dumped back with `to_dict`, zero values are left out unless
    the field name is listed in `always_emit`.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    always_emit: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        if data is None:
            return {}
        if not isinstance(data, dict):
            return data

        cleaned = {}
        for key, value in data.items():
            if value is None:
                continue
            if isinstance(value, list):
                value = [cls._item_zero(key) if item is None else item for item in value]
            cleaned[key] = value
        return cleaned

    @classmethod
    def _item_zero(cls, key: str) -> Any:
        for name, field in cls.model_fields.items():
            if key in (name, field.alias):
                item_type = (get_args(field.annotation) or (None,))[0]
                if isinstance(item_type, type) and not issubclass(item_type, BaseModel):
                    return item_type()
                break
        # models turn None into their zero value themselves
        return None

    def to_dict(self) -> dict[str, Any]:
        data = {}
        for name, field in type(self).model_fields.items():
            value = _dump(getattr(self, name))
            if (not value or value == ZERO_TIME) and name not in self.always_emit:
                continue
            data[field.alias or name] = value
        return data

    def to_json(self) -> bytes:
        return orjson.dumps(self.to_dict())


def _dump(value: Any) -> Any:
    if isinstance(value, TwitchModel):
        return value.to_dict()
    if isinstance(value, list):
        return [_dump(v) for v in value]
    return value
