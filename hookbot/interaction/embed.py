"""Rich-message (embed) structures returned by commands.

Plain dataclasses with ``to_dict()`` producing the chat platform's JSON shape;
unset optional members are omitted.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class EmbedField:
    name: str
    value: str
    inline: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"name": self.name, "value": self.value}
        if self.inline is not None:
            data["inline"] = self.inline
        return data


@dataclass
class Embed:
    title: str
    description: str
    fields: list[EmbedField] = field(default_factory=list)
    color: int | None = None
    url: str | None = None
    thumbnail: str | None = None    # image URL
    footer: str | None = None       # footer text

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "title": self.title,
            "description": self.description,
            "fields": [f.to_dict() for f in self.fields],
        }
        if self.color is not None:
            data["color"] = self.color
        if self.url is not None:
            data["url"] = self.url
        if self.thumbnail is not None:
            data["thumbnail"] = {"url": self.thumbnail}
        if self.footer is not None:
            data["footer"] = {"text": self.footer}
        return data
