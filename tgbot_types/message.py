"""Chat messages, channel posts and the entities inside their text."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar, Union

from .chat import Channel, Chat, MessageChat, RawChat, User, parse_chat
from .media import (
    Audio,
    Contact,
    Document,
    Location,
    PhotoSize,
    Sticker,
    Venue,
    Video,
    VideoNote,
    Voice,
)
from .primitive import (
    DeserializeError,
    optional_int,
    optional_str,
    parse_true,
    require_int,
    require_mapping,
    require_str,
)
from .refs import ChatId, ChatRef, MessageId

T = TypeVar("T")


def _require_field(data: Mapping[str, Any], name: str) -> Any:
    if name not in data:
        raise DeserializeError(f"missing field `{name}`")
    return data[name]


def _optional(data: Mapping[str, Any], name: str, parse: Callable[[Any], T]) -> T | None:
    value = data.get(name)
    return None if value is None else parse(value)


def _list_of(parse: Callable[[Any], T], name: str) -> Callable[[Any], list[T]]:
    def parse_list(value: Any) -> list[T]:
        if not isinstance(value, list):
            raise DeserializeError(
                f"invalid type for field `{name}`: expected a list, got {value!r}"
            )
        return [parse(item) for item in value]

    return parse_list


class MessageEntityKind(Enum):
    """Kind of a special entity in message text."""

    MENTION = "mention"
    HASHTAG = "hashtag"
    BOT_COMMAND = "bot_command"
    URL = "url"
    EMAIL = "email"
    BOLD = "bold"
    ITALIC = "italic"
    CODE = "code"
    PRE = "pre"
    TEXT_LINK = "text_link"
    TEXT_MENTION = "text_mention"
    UNKNOWN = "unknown"


_KNOWN_ENTITY_TYPES = {
    kind.value: kind for kind in MessageEntityKind if kind is not MessageEntityKind.UNKNOWN
}


@dataclass(frozen=True)
class RawMessageEntity:
    """A message entity exactly as the API sends it."""

    type: str
    offset: int
    length: int
    url: str | None = None
    user: User | None = None

    @classmethod
    def from_json(cls, data: Any) -> RawMessageEntity:
        """Decode an entity object without interpreting its type."""
        data = require_mapping(data, "a MessageEntity object")
        return cls(
            type=require_str(data, "type"),
            offset=require_int(data, "offset"),
            length=require_int(data, "length"),
            url=optional_str(data, "url"),
            user=_optional(data, "user", User.from_json),
        )


@dataclass(frozen=True)
class MessageEntity:
    """One special entity in a text message: a hashtag, a URL, a command and so on.

    ``url`` is set for text links, ``user`` for text mentions and ``raw``
    for entity types this package does not know.
    """

    offset: int
    length: int
    kind: MessageEntityKind
    url: str | None = None
    user: User | None = None
    raw: RawMessageEntity | None = None

    @classmethod
    def from_json(cls, data: Any) -> MessageEntity:
        """Decode an entity object."""
        raw = RawMessageEntity.from_json(data)
        kind = _KNOWN_ENTITY_TYPES.get(raw.type, MessageEntityKind.UNKNOWN)
        if kind is MessageEntityKind.TEXT_LINK:
            if raw.url is None:
                raise DeserializeError("missing field `url`")
            return cls(raw.offset, raw.length, kind, url=raw.url)
        if kind is MessageEntityKind.TEXT_MENTION:
            if raw.user is None:
                raise DeserializeError("missing field `user`")
            return cls(raw.offset, raw.length, kind, user=raw.user)
        if kind is MessageEntityKind.UNKNOWN:
            return cls(raw.offset, raw.length, kind, raw=raw)
        return cls(raw.offset, raw.length, kind)


@dataclass(frozen=True)
class ForwardFromUser:
    """A message originally sent by a user."""

    user: User

    def to_chat_ref(self) -> ChatRef:
        return self.user.to_chat_ref()


@dataclass(frozen=True)
class ForwardFromChannel:
    """A message originally posted in a channel."""

    channel: Channel
    message_id: int

    def to_chat_ref(self) -> ChatRef:
        return self.channel.to_chat_ref()


ForwardFrom = Union[ForwardFromUser, ForwardFromChannel]


@dataclass(frozen=True)
class Forward:
    """Information about the original of a forwarded message."""

    date: int
    from_: ForwardFrom

    def to_chat_ref(self) -> ChatRef:
        return self.from_.to_chat_ref()


class MessageKindType(Enum):
    """What a message carries."""

    TEXT = "text"
    AUDIO = "audio"
    DOCUMENT = "document"
    PHOTO = "photo"
    STICKER = "sticker"
    VIDEO = "video"
    VOICE = "voice"
    VIDEO_NOTE = "video_note"
    CONTACT = "contact"
    LOCATION = "location"
    VENUE = "venue"
    NEW_CHAT_MEMBERS = "new_chat_members"
    LEFT_CHAT_MEMBER = "left_chat_member"
    NEW_CHAT_TITLE = "new_chat_title"
    NEW_CHAT_PHOTO = "new_chat_photo"
    DELETE_CHAT_PHOTO = "delete_chat_photo"
    GROUP_CHAT_CREATED = "group_chat_created"
    SUPERGROUP_CHAT_CREATED = "supergroup_chat_created"
    CHANNEL_CHAT_CREATED = "channel_chat_created"
    MIGRATE_TO_CHAT_ID = "migrate_to_chat_id"
    MIGRATE_FROM_CHAT_ID = "migrate_from_chat_id"
    PINNED_MESSAGE = "pinned_message"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class MessageKind:
    """The content of a message.

    ``data`` holds the payload for the kind (the text, the file, the users,
    the pinned message, the raw message for unknown kinds); service flags
    such as ``GROUP_CHAT_CREATED`` carry no data.
    """

    type: MessageKindType
    data: Any = None
    entities: tuple[MessageEntity, ...] = ()
    caption: str | None = None
    media_group_id: str | None = None


@dataclass(frozen=True)
class RawMessage:
    """A message object exactly as the API sends it."""

    message_id: int
    date: int
    chat: Chat
    from_: User | None = None
    forward_from: User | None = None
    forward_from_chat: Chat | None = None
    forward_from_message_id: int | None = None
    forward_date: int | None = None
    reply_to_message: Message | ChannelPost | None = None
    edit_date: int | None = None
    media_group_id: str | None = None
    text: str | None = None
    entities: list[MessageEntity] | None = None
    audio: Audio | None = None
    document: Document | None = None
    photo: list[PhotoSize] | None = None
    sticker: Sticker | None = None
    video: Video | None = None
    voice: Voice | None = None
    video_note: VideoNote | None = None
    caption: str | None = None
    contact: Contact | None = None
    location: Location | None = None
    venue: Venue | None = None
    new_chat_members: list[User] | None = None
    left_chat_member: User | None = None
    new_chat_title: str | None = None
    new_chat_photo: list[PhotoSize] | None = None
    delete_chat_photo: bool | None = None
    group_chat_created: bool | None = None
    supergroup_chat_created: bool | None = None
    channel_chat_created: bool | None = None
    migrate_to_chat_id: int | None = None
    migrate_from_chat_id: int | None = None
    pinned_message: Message | ChannelPost | None = None

    @classmethod
    def from_json(cls, data: Any) -> RawMessage:
        """Decode a message object field by field."""
        data = require_mapping(data, "a Message object")
        return cls(
            message_id=require_int(data, "message_id"),
            date=require_int(data, "date"),
            chat=parse_chat(_require_field(data, "chat")),
            from_=_optional(data, "from", User.from_json),
            forward_from=_optional(data, "forward_from", User.from_json),
            forward_from_chat=_optional(data, "forward_from_chat", parse_chat),
            forward_from_message_id=optional_int(data, "forward_from_message_id"),
            forward_date=optional_int(data, "forward_date"),
            reply_to_message=_optional(
                data, "reply_to_message", parse_message_or_channel_post
            ),
            edit_date=optional_int(data, "edit_date"),
            media_group_id=optional_str(data, "media_group_id"),
            text=optional_str(data, "text"),
            entities=_optional(
                data, "entities", _list_of(MessageEntity.from_json, "entities")
            ),
            audio=_optional(data, "audio", Audio.from_json),
            document=_optional(data, "document", Document.from_json),
            photo=_optional(data, "photo", _list_of(PhotoSize.from_json, "photo")),
            sticker=_optional(data, "sticker", Sticker.from_json),
            video=_optional(data, "video", Video.from_json),
            voice=_optional(data, "voice", Voice.from_json),
            video_note=_optional(data, "video_note", VideoNote.from_json),
            caption=optional_str(data, "caption"),
            contact=_optional(data, "contact", Contact.from_json),
            location=_optional(data, "location", Location.from_json),
            venue=_optional(data, "venue", Venue.from_json),
            new_chat_members=_optional(
                data, "new_chat_members", _list_of(User.from_json, "new_chat_members")
            ),
            left_chat_member=_optional(data, "left_chat_member", User.from_json),
            new_chat_title=optional_str(data, "new_chat_title"),
            new_chat_photo=_optional(
                data, "new_chat_photo", _list_of(PhotoSize.from_json, "new_chat_photo")
            ),
            delete_chat_photo=_optional(data, "delete_chat_photo", parse_true),
            group_chat_created=_optional(data, "group_chat_created", parse_true),
            supergroup_chat_created=_optional(
                data, "supergroup_chat_created", parse_true
            ),
            channel_chat_created=_optional(data, "channel_chat_created", parse_true),
            migrate_to_chat_id=optional_int(data, "migrate_to_chat_id"),
            migrate_from_chat_id=optional_int(data, "migrate_from_chat_id"),
            pinned_message=_optional(
                data, "pinned_message", parse_message_or_channel_post
            ),
        )


# Checked in this order; the first field present decides the kind.
_KIND_FIELDS: tuple[tuple[str, MessageKindType, bool, bool], ...] = (
    ("audio", MessageKindType.AUDIO, False, False),
    ("document", MessageKindType.DOCUMENT, True, False),
    ("photo", MessageKindType.PHOTO, True, True),
    ("sticker", MessageKindType.STICKER, False, False),
    ("video", MessageKindType.VIDEO, True, True),
    ("voice", MessageKindType.VOICE, False, False),
    ("video_note", MessageKindType.VIDEO_NOTE, False, False),
    ("contact", MessageKindType.CONTACT, False, False),
    ("location", MessageKindType.LOCATION, False, False),
    ("venue", MessageKindType.VENUE, False, False),
    ("new_chat_members", MessageKindType.NEW_CHAT_MEMBERS, False, False),
    ("left_chat_member", MessageKindType.LEFT_CHAT_MEMBER, False, False),
    ("new_chat_title", MessageKindType.NEW_CHAT_TITLE, False, False),
    ("new_chat_photo", MessageKindType.NEW_CHAT_PHOTO, False, False),
    ("delete_chat_photo", MessageKindType.DELETE_CHAT_PHOTO, False, False),
    ("group_chat_created", MessageKindType.GROUP_CHAT_CREATED, False, False),
    ("supergroup_chat_created", MessageKindType.SUPERGROUP_CHAT_CREATED, False, False),
    ("channel_chat_created", MessageKindType.CHANNEL_CHAT_CREATED, False, False),
    ("migrate_to_chat_id", MessageKindType.MIGRATE_TO_CHAT_ID, False, False),
    ("migrate_from_chat_id", MessageKindType.MIGRATE_FROM_CHAT_ID, False, False),
    ("pinned_message", MessageKindType.PINNED_MESSAGE, False, False),
)

_FLAG_KINDS = frozenset(
    {
        MessageKindType.DELETE_CHAT_PHOTO,
        MessageKindType.GROUP_CHAT_CREATED,
        MessageKindType.SUPERGROUP_CHAT_CREATED,
        MessageKindType.CHANNEL_CHAT_CREATED,
    }
)


def _kind_of(raw: RawMessage) -> MessageKind:
    if raw.text is not None:
        return MessageKind(
            MessageKindType.TEXT, raw.text, entities=tuple(raw.entities or ())
        )
    for field, kind_type, with_caption, with_group in _KIND_FIELDS:
        value = getattr(raw, field)
        if value is None:
            continue
        return MessageKind(
            kind_type,
            None if kind_type in _FLAG_KINDS else value,
            caption=raw.caption if with_caption else None,
            media_group_id=raw.media_group_id if with_group else None,
        )
    return MessageKind(MessageKindType.UNKNOWN, raw)


def _forward_of(raw: RawMessage) -> Forward | None:
    date = raw.forward_date
    user = raw.forward_from
    chat = raw.forward_from_chat
    message_id = raw.forward_from_message_id
    if date is None and user is None and chat is None and message_id is None:
        return None
    if date is not None and user is not None and chat is None and message_id is None:
        return Forward(date, ForwardFromUser(user))
    if (
        date is not None
        and user is None
        and isinstance(chat, Channel)
        and message_id is not None
    ):
        return Forward(date, ForwardFromChannel(chat, message_id))
    raise DeserializeError("invalid forward fields combination")


@dataclass(frozen=True)
class Message:
    """A message in a private chat, group or supergroup."""

    id: MessageId
    from_: User
    date: int
    chat: MessageChat
    kind: MessageKind
    forward: Forward | None = None
    reply_to_message: Message | ChannelPost | None = None
    edit_date: int | None = None

    @classmethod
    def from_raw(cls, raw: RawMessage) -> Message:
        """Interpret a raw message; raises if it is not a chat message."""
        if raw.from_ is None:
            raise DeserializeError("Missing `from` field for Message")
        if isinstance(raw.chat, Channel):
            raise DeserializeError("Channel chat in Message")
        forward = _forward_of(raw)
        return cls(
            id=MessageId(raw.message_id),
            from_=raw.from_,
            date=raw.date,
            chat=raw.chat,
            kind=_kind_of(raw),
            forward=forward,
            reply_to_message=raw.reply_to_message,
            edit_date=raw.edit_date,
        )

    @classmethod
    def from_json(cls, data: Any) -> Message:
        """Decode a chat message."""
        return cls.from_raw(RawMessage.from_json(data))

    def to_source_chat(self) -> ChatId:
        return self.chat.chat_id()

    def to_message_id(self) -> MessageId:
        return self.id


@dataclass(frozen=True)
class ChannelPost:
    """A message posted in a channel."""

    id: MessageId
    date: int
    chat: Channel
    kind: MessageKind
    forward: Forward | None = None
    reply_to_message: Message | ChannelPost | None = None
    edit_date: int | None = None

    @classmethod
    def from_raw(cls, raw: RawMessage) -> ChannelPost:
        """Interpret a raw message; raises if it was not posted in a channel."""
        if not isinstance(raw.chat, Channel):
            raise DeserializeError("Expected channel chat type for ChannelMessage")
        forward = _forward_of(raw)
        return cls(
            id=MessageId(raw.message_id),
            date=raw.date,
            chat=raw.chat,
            kind=_kind_of(raw),
            forward=forward,
            reply_to_message=raw.reply_to_message,
            edit_date=raw.edit_date,
        )

    @classmethod
    def from_json(cls, data: Any) -> ChannelPost:
        """Decode a channel post."""
        return cls.from_raw(RawMessage.from_json(data))

    def to_source_chat(self) -> ChatId:
        return self.chat.chat_id()

    def to_message_id(self) -> MessageId:
        return self.id


def parse_message_or_channel_post(data: Any) -> Message | ChannelPost:
    """Decode a message, as a channel post when its chat is a channel."""
    raw = RawMessage.from_json(data)
    if isinstance(raw.chat, Channel):
        return ChannelPost.from_raw(raw)
    return Message.from_raw(raw)


__all__ = [
    "Channel",
    "ChannelPost",
    "Forward",
    "ForwardFromChannel",
    "ForwardFromUser",
    "Message",
    "MessageEntity",
    "MessageEntityKind",
    "MessageKind",
    "MessageKindType",
    "RawChat",
    "RawMessage",
    "RawMessageEntity",
    "parse_message_or_channel_post",
]