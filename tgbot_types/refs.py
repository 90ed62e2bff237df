"""Typed identifiers and references to chats, users, messages and files."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .primitive import INTEGER_MAX, INTEGER_MIN, DeserializeError


@dataclass(frozen=True, order=True)
class IntegerId:
    """An integer identifier; each subclass is a distinct kind of id."""

    value: int

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int):
            raise TypeError(f"{type(self).__name__} needs an integer, got {self.value!r}")

    @classmethod
    def from_json(cls, value: Any):
        """Build the identifier from a decoded JSON integer."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise DeserializeError(f"invalid type: expected an integer, got {value!r}")
        if not INTEGER_MIN <= value <= INTEGER_MAX:
            raise DeserializeError(f"integer {value} out of range")
        return cls(value)

    def to_json(self) -> int:
        return self.value

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class ChatId(IntegerId):
    """Unique chat identifier."""

    def to_chat_ref(self) -> ChatRef:
        return ChatRef.from_chat_id(self)


class UserId(IntegerId):
    """Unique user identifier."""

    def to_chat_id(self) -> ChatId:
        return ChatId(self.value)

    def to_chat_ref(self) -> ChatRef:
        return ChatRef.from_chat_id(self.to_chat_id())

    def to_user_id(self) -> UserId:
        return self


class GroupId(IntegerId):
    """Unique group identifier."""

    def to_chat_id(self) -> ChatId:
        return ChatId(self.value)

    def to_chat_ref(self) -> ChatRef:
        return ChatRef.from_chat_id(self.to_chat_id())


class SupergroupId(IntegerId):
    """Unique supergroup identifier."""

    def to_chat_id(self) -> ChatId:
        return ChatId(self.value)

    def to_chat_ref(self) -> ChatRef:
        return ChatRef.from_chat_id(self.to_chat_id())


class ChannelId(IntegerId):
    """Unique channel identifier."""

    def to_chat_id(self) -> ChatId:
        return ChatId(self.value)

    def to_chat_ref(self) -> ChatRef:
        return ChatRef.from_chat_id(self.to_chat_id())


class MessageId(IntegerId):
    """Unique message identifier inside a chat."""

    def to_message_id(self) -> MessageId:
        return self


@dataclass(frozen=True)
class ChatRef:
    """A target chat: either its id or a channel username such as ``@name``."""

    target: ChatId | str

    @classmethod
    def from_chat_id(cls, chat_id: ChatId) -> ChatRef:
        return cls(chat_id)

    @classmethod
    def channel_username(cls, username: str) -> ChatRef:
        return cls(username)

    def to_chat_ref(self) -> ChatRef:
        return self

    def to_json(self) -> int | str:
        if isinstance(self.target, ChatId):
            return self.target.to_json()
        return self.target


@dataclass(frozen=True, order=True)
class FileRef:
    """Reference to a file by its unique identifier."""

    inner: str

    def to_file_ref(self) -> FileRef:
        return self

    def to_json(self) -> str:
        return self.inner


@dataclass(frozen=True, order=True)
class _StringId:
    value: str

    @classmethod
    def from_json(cls, value: Any):
        """Build the identifier from a decoded JSON string."""
        if not isinstance(value, str):
            raise DeserializeError(f"invalid type: expected a string, got {value!r}")
        return cls(value)

    def to_json(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class CallbackQueryId(_StringId):
    """Unique identifier of a callback query."""

    @classmethod
    def from_json(cls, value: Any) -> CallbackQueryId:
        return super().from_json(value)

    def to_json(self) -> str:
        return self.value


class InlineQueryId(_StringId):
    """Unique identifier of an inline query."""

    @classmethod
    def from_json(cls, value: Any) -> InlineQueryId:
        return super().from_json(value)

    def to_json(self) -> str:
        return self.value