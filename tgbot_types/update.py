"""Incoming updates."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, Union

from .callback_query import CallbackQuery
from .inline_query import InlineQuery
from .message import ChannelPost, Message
from .primitive import DeserializeError, require_int, require_mapping


class UpdateKind(Enum):
    """Kind of an incoming update; the value is its JSON field name."""

    MESSAGE = "message"
    EDITED_MESSAGE = "edited_message"
    CHANNEL_POST = "channel_post"
    EDITED_CHANNEL_POST = "edited_channel_post"
    INLINE_QUERY = "inline_query"
    CALLBACK_QUERY = "callback_query"


_PARSERS: dict[UpdateKind, Callable[[Any], Any]] = {
    UpdateKind.MESSAGE: Message.from_json,
    UpdateKind.EDITED_MESSAGE: Message.from_json,
    UpdateKind.CHANNEL_POST: ChannelPost.from_json,
    UpdateKind.EDITED_CHANNEL_POST: ChannelPost.from_json,
    UpdateKind.INLINE_QUERY: InlineQuery.from_json,
    UpdateKind.CALLBACK_QUERY: CallbackQuery.from_json,
}

_KINDS_BY_FIELD = {kind.value: kind for kind in UpdateKind}

UpdatePayload = Union[Message, ChannelPost, InlineQuery, CallbackQuery]


@dataclass(frozen=True)
class Update:
    """An incoming update and what it carries."""

    id: int
    kind: UpdateKind
    data: UpdatePayload

    @classmethod
    def from_json(cls, data: Any) -> Update:
        """Decode an update object.

        The first field, in document order, that names a known kind of
        update decides the kind.
        """
        data = require_mapping(data, "an Update object")
        update_id = require_int(data, "update_id")
        for name, value in data.items():
            kind = _KINDS_BY_FIELD.get(name)
            if kind is not None:
                return cls(id=update_id, kind=kind, data=_PARSERS[kind](value))
        raise DeserializeError("no variant of enum UpdateKind found in flattened data")