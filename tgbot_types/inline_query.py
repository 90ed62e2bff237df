"""Incoming inline queries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .chat import User
from .media import Location
from .primitive import DeserializeError, require_mapping, require_str
from .refs import InlineQueryId


@dataclass(frozen=True)
class InlineQuery:
    """A query typed by a user after the bot's name in any chat."""

    id: InlineQueryId
    from_: User
    query: str
    offset: str
    location: Location | None = None

    @classmethod
    def from_json(cls, data: Any) -> InlineQuery:
        """Decode an inline query object."""
        data = require_mapping(data, "an InlineQuery object")
        for name in ("id", "from"):
            if name not in data:
                raise DeserializeError(f"missing field `{name}`")
        location = data.get("location")
        return cls(
            id=InlineQueryId.from_json(data["id"]),
            from_=User.from_json(data["from"]),
            query=require_str(data, "query"),
            offset=require_str(data, "offset"),
            location=None if location is None else Location.from_json(location),
        )

    def to_inline_query_id(self) -> InlineQueryId:
        return self.id