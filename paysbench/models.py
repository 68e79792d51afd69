from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.fields import FieldInfo

TRANSLATABLE_FLAG = "translatable"


def translatable(default: Any = "", **kwargs: Any) -> Any:
    """Declare a model field whose value is a source key to translate."""
    extra = dict(kwargs.pop("json_schema_extra", None) or {})
    extra[TRANSLATABLE_FLAG] = True
    return Field(default, json_schema_extra=extra, **kwargs)


def is_translatable(field: FieldInfo) -> bool:
    """Return ``True`` when ``field`` was declared with :func:`translatable`."""
    extra = field.json_schema_extra
    if not isinstance(extra, dict):
        return False
    return bool(extra.get(TRANSLATABLE_FLAG, False))


class Country(BaseModel):
    model_config = ConfigDict(frozen=True)

    code: str
    label: str = translatable()
    description: str = translatable()
