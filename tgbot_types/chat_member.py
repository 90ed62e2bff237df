"""Members of a chat and their status."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .chat import User
from .primitive import DeserializeError, optional_bool, optional_int, require_mapping
from .refs import ChatRef, UserId


class ChatMemberStatus(Enum):
    """The member's status in the chat.

    Statuses the API adds later parse to a member named ``UNKNOWN``
    whose value is the status string as received.
    """

    CREATOR = "creator"
    ADMINISTRATOR = "administrator"
    MEMBER = "member"
    LEFT = "left"
    KICKED = "kicked"

    @classmethod
    def parse(cls, value: Any) -> ChatMemberStatus:
        """Decode a status string."""
        if not isinstance(value, str):
            raise DeserializeError(
                "invalid type: expected creator | administrator | member | left | kicked, "
                f"got {value!r}"
            )
        return cls(value)

    @classmethod
    def _missing_(cls, value: object) -> ChatMemberStatus | None:
        if not isinstance(value, str):
            return None
        member = _UNKNOWN_STATUSES.get(value)
        if member is None:
            member = object.__new__(cls)
            member._name_ = "UNKNOWN"
            member._value_ = value
            _UNKNOWN_STATUSES[value] = member
        return member


_UNKNOWN_STATUSES: dict[str, ChatMemberStatus] = {}

_PERMISSION_FIELDS = (
    "can_be_edited",
    "can_change_info",
    "can_post_messages",
    "can_edit_messages",
    "can_delete_messages",
    "can_invite_users",
    "can_restrict_members",
    "can_pin_messages",
    "can_promote_members",
    "can_send_messages",
    "can_send_media_messages",
    "can_send_other_messages",
    "can_add_web_page_previews",
)


@dataclass(frozen=True)
class ChatMember:
    """Information about one member of a chat."""

    user: User
    status: ChatMemberStatus
    until_date: int | None = None
    can_be_edited: bool | None = None
    can_change_info: bool | None = None
    can_post_messages: bool | None = None
    can_edit_messages: bool | None = None
    can_delete_messages: bool | None = None
    can_invite_users: bool | None = None
    can_restrict_members: bool | None = None
    can_pin_messages: bool | None = None
    can_promote_members: bool | None = None
    can_send_messages: bool | None = None
    can_send_media_messages: bool | None = None
    can_send_other_messages: bool | None = None
    can_add_web_page_previews: bool | None = None

    @classmethod
    def from_json(cls, data: Any) -> ChatMember:
        """Decode a chat member object."""
        data = require_mapping(data, "a ChatMember object")
        for name in ("user", "status"):
            if name not in data:
                raise DeserializeError(f"missing field `{name}`")
        return cls(
            user=User.from_json(data["user"]),
            status=ChatMemberStatus.parse(data["status"]),
            until_date=optional_int(data, "until_date"),
            **{name: optional_bool(data, name) for name in _PERMISSION_FIELDS},
        )

    def to_chat_ref(self) -> ChatRef:
        return self.user.to_chat_ref()

    def to_user_id(self) -> UserId:
        return self.user.id