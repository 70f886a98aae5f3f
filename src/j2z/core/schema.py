"""Pydantic v2 models for Jekyll and Zola front matter."""

from __future__ import annotations

import datetime as dt
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, StrictStr, model_validator
from typing_extensions import TypeAliasType

# Any value a front-matter key can carry through unexamined.
ExtraValue = TypeAliasType(
    "ExtraValue",
    "Union[StrictStr, bool, int, float, None, list[ExtraValue], dict[str, ExtraValue]]",
)


def _collect_extra(data: Any, named: set[str]) -> Any:
    """Move every key not declared on the model into ``extra``.

    A literal ``extra`` key in the input is itself an unknown key and is
    nested under ``extra`` like any other.
    """
    if not isinstance(data, dict):
        return data
    extra = {k: v for k, v in data.items() if k not in named}
    fields = {k: v for k, v in data.items() if k in named}
    fields["extra"] = extra or None
    return fields


class JekyllFront(BaseModel):
    model_config = ConfigDict(strict=True)

    title: str
    date: str
    subtitle: str
    author: str
    extra: Optional[dict[str, ExtraValue]] = None

    @model_validator(mode="before")
    @classmethod
    def _flatten_extra(cls, data: Any) -> Any:
        return _collect_extra(data, {"title", "date", "subtitle", "author"})


class ZolaFront(BaseModel):
    title: str
    date: Union[dt.datetime, dt.date, dt.time]
    description: str
    author: str
    extra: Optional[dict[str, ExtraValue]] = None

    def to_toml_dict(self) -> dict[str, Any]:
        """Named fields first, then extra keys at the same level."""
        doc: dict[str, Any] = {
            "title": self.title,
            "date": self.date,
            "description": self.description,
            "author": self.author,
        }
        for key, value in (self.extra or {}).items():
            doc.setdefault(key, value)
        return doc
