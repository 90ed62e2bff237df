"""Users and chats: private chats, groups, supergroups and channels."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .primitive import (
    DeserializeError,
    optional_bool,
    optional_str,
    require_bool,
    require_int,
    require_mapping,
    require_str,
)
from .refs import ChannelId, ChatId, ChatRef, GroupId, SupergroupId, UserId


@dataclass(frozen=True)
class User:
    """A Telegram user or bot."""

    id: UserId
    first_name: str
    last_name: str | None = None
    username: str | None = None
    is_bot: bool = False
    language_code: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> User:
        """Decode a user object."""
        data = require_mapping(data, "a User object")
        return cls(
            id=UserId(require_int(data, "id")),
            first_name=require_str(data, "first_name"),
            last_name=optional_str(data, "last_name"),
            username=optional_str(data, "username"),
            is_bot=require_bool(data, "is_bot"),
            language_code=optional_str(data, "language_code"),
        )

    def chat_id(self) -> ChatId:
        return self.id.to_chat_id()

    def to_chat_ref(self) -> ChatRef:
        return self.id.to_chat_ref()

    def to_user_id(self) -> UserId:
        return self.id


@dataclass(frozen=True)
class Group:
    """A basic group chat."""

    id: GroupId
    title: str
    all_members_are_administrators: bool

    def chat_id(self) -> ChatId:
        return self.id.to_chat_id()

    def to_chat_ref(self) -> ChatRef:
        return self.id.to_chat_ref()


@dataclass(frozen=True)
class Supergroup:
    """A supergroup chat."""

    id: SupergroupId
    title: str
    username: str | None = None

    def chat_id(self) -> ChatId:
        return self.id.to_chat_id()

    def to_chat_ref(self) -> ChatRef:
        return self.id.to_chat_ref()


@dataclass(frozen=True)
class Channel:
    """A channel."""

    id: ChannelId
    title: str
    username: str | None = None

    def chat_id(self) -> ChatId:
        return self.id.to_chat_id()

    def to_chat_ref(self) -> ChatRef:
        return self.id.to_chat_ref()


@dataclass(frozen=True)
class RawChat:
    """A chat object exactly as the API sends it; used for unknown chat types."""

    id: int
    type: str
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    language_code: str | None = None
    all_members_are_administrators: bool | None = None

    @classmethod
    def from_json(cls, data: Any) -> RawChat:
        """Decode a chat object without interpreting its type."""
        data = require_mapping(data, "a Chat object")
        return cls(
            id=require_int(data, "id"),
            type=require_str(data, "type"),
            title=optional_str(data, "title"),
            username=optional_str(data, "username"),
            first_name=optional_str(data, "first_name"),
            last_name=optional_str(data, "last_name"),
            language_code=optional_str(data, "language_code"),
            all_members_are_administrators=optional_bool(
                data, "all_members_are_administrators"
            ),
        )

    def chat_id(self) -> ChatId:
        return ChatId(self.id)

    def to_chat_ref(self) -> ChatRef:
        return self.chat_id().to_chat_ref()


Chat = Union[User, Group, Supergroup, Channel, RawChat]
MessageChat = Union[User, Group, Supergroup, RawChat]


def _required(value: Any, name: str) -> Any:
    if value is None:
        raise DeserializeError(f"missing field `{name}`")
    return value


def parse_chat(data: Mapping[str, Any]) -> Chat:
    """Decode a chat object into the class matching its ``type`` field.

    Unknown chat types come back as :class:`RawChat`.
    """
    raw = RawChat.from_json(data)
    if raw.type == "private":
        return User(
            id=UserId(raw.id),
            first_name=_required(raw.first_name, "first_name"),
            last_name=raw.last_name,
            username=raw.username,
            is_bot=False,
            language_code=raw.language_code,
        )
    if raw.type == "group":
        return Group(
            id=GroupId(raw.id),
            title=_required(raw.title, "title"),
            all_members_are_administrators=_required(
                raw.all_members_are_administrators, "all_members_are_administrators"
            ),
        )
    if raw.type == "supergroup":
        return Supergroup(
            id=SupergroupId(raw.id),
            title=_required(raw.title, "title"),
            username=raw.username,
        )
    if raw.type == "channel":
        return Channel(
            id=ChannelId(raw.id),
            title=_required(raw.title, "title"),
            username=raw.username,
        )
    return raw