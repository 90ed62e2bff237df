"""Incoming callback queries from inline keyboard buttons."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .chat import User
from .message import Message
from .primitive import DeserializeError, require_mapping, require_str
from .refs import CallbackQueryId


@dataclass(frozen=True)
class CallbackQuery:
    """A press of a callback button in an inline keyboard.

    ``data`` comes from the client and may hold anything.
    """

    id: CallbackQueryId
    from_: User
    message: Message
    chat_instance: str
    data: str

    @classmethod
    def from_json(cls, data: Any) -> CallbackQuery:
        """Decode a callback query object."""
        data = require_mapping(data, "a CallbackQuery object")
        for name in ("id", "from", "message"):
            if name not in data:
                raise DeserializeError(f"missing field `{name}`")
        return cls(
            id=CallbackQueryId.from_json(data["id"]),
            from_=User.from_json(data["from"]),
            message=Message.from_json(data["message"]),
            chat_instance=require_str(data, "chat_instance"),
            data=require_str(data, "data"),
        )

    def to_callback_query_id(self) -> CallbackQueryId:
        return self.id