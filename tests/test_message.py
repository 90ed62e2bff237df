import pytest

from tgbot_types.chat import Channel, RawChat, User
from tgbot_types.media import PhotoSize
from tgbot_types.message import (
    ChannelPost,
    Forward,
    ForwardFromChannel,
    ForwardFromUser,
    Message,
    MessageEntity,
    MessageEntityKind,
    MessageKindType,
    RawMessage,
    RawMessageEntity,
    parse_message_or_channel_post,
)
from tgbot_types.primitive import DeserializeError
from tgbot_types.refs import ChannelId, ChatId, ChatRef, MessageId, UserId

USER = {"id": 10, "first_name": "Alice", "is_bot": False, "username": "alice"}
PRIVATE_CHAT = {"id": 10, "type": "private", "first_name": "Alice"}
GROUP_CHAT = {
    "id": -20,
    "type": "group",
    "title": "Friends",
    "all_members_are_administrators": True,
}
CHANNEL_CHAT = {"id": -1001, "type": "channel", "title": "News", "username": "news"}


def message(**extra):
    data = {"message_id": 5, "from": USER, "date": 1500, "chat": PRIVATE_CHAT}
    data.update(extra)
    return data


def channel_post(**extra):
    data = {"message_id": 7, "date": 1600, "chat": CHANNEL_CHAT}
    data.update(extra)
    return data


def test_text_message():
    msg = Message.from_json(message(text="hello"))
    assert msg.id == MessageId(5)
    assert msg.date == 1500
    assert msg.from_.first_name == "Alice"
    assert msg.kind.type is MessageKindType.TEXT
    assert msg.kind.data == "hello"
    assert msg.kind.entities == ()
    assert msg.forward is None


def test_text_entities():
    msg = Message.from_json(
        message(
            text="/start now",
            entities=[{"type": "bot_command", "offset": 0, "length": 6}],
        )
    )
    assert msg.kind.entities == (MessageEntity(0, 6, MessageEntityKind.BOT_COMMAND),)


def test_text_takes_priority_over_other_content():
    msg = Message.from_json(
        message(text="caption-less", voice={"file_id": "v1", "duration": 3})
    )
    assert msg.kind.type is MessageKindType.TEXT


def test_entity_text_link():
    entity = MessageEntity.from_json(
        {"type": "text_link", "offset": 1, "length": 2, "url": "https://example.com"}
    )
    assert entity.kind is MessageEntityKind.TEXT_LINK
    assert entity.url == "https://example.com"


def test_entity_text_link_requires_url():
    with pytest.raises(DeserializeError, match="url"):
        MessageEntity.from_json({"type": "text_link", "offset": 1, "length": 2})


def test_entity_text_mention_requires_user():
    with pytest.raises(DeserializeError, match="user"):
        MessageEntity.from_json({"type": "text_mention", "offset": 0, "length": 3})


def test_entity_text_mention():
    entity = MessageEntity.from_json(
        {"type": "text_mention", "offset": 0, "length": 3, "user": USER}
    )
    assert entity.user == User.from_json(USER)


def test_entity_unknown_keeps_raw():
    data = {"type": "spoiler", "offset": 2, "length": 4}
    entity = MessageEntity.from_json(data)
    assert entity.kind is MessageEntityKind.UNKNOWN
    assert entity.raw == RawMessageEntity.from_json(data)
    assert entity.raw.type == "spoiler"


def test_message_requires_from():
    data = message(text="x")
    del data["from"]
    with pytest.raises(DeserializeError, match="from"):
        Message.from_json(data)


def test_message_rejects_channel_chat():
    with pytest.raises(DeserializeError, match="Channel chat"):
        Message.from_json(message(chat=CHANNEL_CHAT, text="x"))


def test_message_requires_chat():
    data = message(text="x")
    del data["chat"]
    with pytest.raises(DeserializeError, match="chat"):
        Message.from_json(data)


def test_channel_post():
    post = ChannelPost.from_json(channel_post(text="news"))
    assert post.chat == Channel(ChannelId(-1001), "News", "news")
    assert post.kind.data == "news"
    assert post.to_source_chat() == ChatId(-1001)
    assert post.to_message_id() == MessageId(7)


def test_channel_post_rejects_private_chat():
    with pytest.raises(DeserializeError, match="channel"):
        ChannelPost.from_json(channel_post(chat=PRIVATE_CHAT, text="x"))


def test_parse_message_or_channel_post_dispatches():
    post = parse_message_or_channel_post(channel_post(text="a"))
    assert type(post) is ChannelPost
    assert post.id == MessageId(7)
    assert post.to_source_chat() == ChatId(-1001)

    msg = parse_message_or_channel_post(message(text="b"))
    assert type(msg) is Message
    assert msg.id == MessageId(5)
    assert msg.kind.data == "b"
    assert msg.to_source_chat() == ChatId(10)


def test_source_chat_and_message_id():
    msg = Message.from_json(message(chat=GROUP_CHAT, text="hi"))
    assert msg.to_source_chat() == ChatId(-20)
    assert msg.to_message_id() == MessageId(5)


def test_unknown_chat_type_is_kept_raw():
    msg = Message.from_json(message(chat={"id": 3, "type": "secret"}, text="x"))
    assert isinstance(msg.chat, RawChat)
    assert msg.to_source_chat() == ChatId(3)


def test_forward_from_user():
    msg = Message.from_json(message(text="x", forward_date=100, forward_from=USER))
    assert msg.forward == Forward(100, ForwardFromUser(User.from_json(USER)))
    assert msg.forward.to_chat_ref() == ChatRef.from_chat_id(ChatId(10))


def test_forward_from_channel():
    msg = Message.from_json(
        message(
            text="x",
            forward_date=100,
            forward_from_chat=CHANNEL_CHAT,
            forward_from_message_id=42,
        )
    )
    assert isinstance(msg.forward.from_, ForwardFromChannel)
    assert msg.forward.from_.message_id == 42
    assert msg.forward.to_chat_ref() == ChatRef.from_chat_id(ChatId(-1001))


@pytest.mark.parametrize(
    "extra",
    [
        {"forward_date": 100},
        {"forward_from": USER},
        {"forward_date": 100, "forward_from": USER, "forward_from_message_id": 1},
        {"forward_date": 100, "forward_from_chat": GROUP_CHAT, "forward_from_message_id": 1},
        {"forward_date": 100, "forward_from_chat": CHANNEL_CHAT},
    ],
)
def test_invalid_forward_combinations(extra):
    with pytest.raises(DeserializeError, match="invalid forward"):
        Message.from_json(message(text="x", **extra))


def test_photo_with_caption_and_group():
    sizes = [{"file_id": "p1", "width": 90, "height": 60}]
    msg = Message.from_json(message(photo=sizes, caption="look", media_group_id="g1"))
    assert msg.kind.type is MessageKindType.PHOTO
    assert msg.kind.data == [PhotoSize("p1", 90, 60)]
    assert msg.kind.caption == "look"
    assert msg.kind.media_group_id == "g1"


def test_document_keeps_caption_but_not_group():
    msg = Message.from_json(
        message(document={"file_id": "d1"}, caption="doc", media_group_id="g1")
    )
    assert msg.kind.type is MessageKindType.DOCUMENT
    assert msg.kind.caption == "doc"
    assert msg.kind.media_group_id is None


def test_new_chat_members():
    msg = Message.from_json(message(chat=GROUP_CHAT, new_chat_members=[USER]))
    assert msg.kind.type is MessageKindType.NEW_CHAT_MEMBERS
    assert [user.id for user in msg.kind.data] == [UserId(10)]


def test_service_flag():
    msg = Message.from_json(message(chat=GROUP_CHAT, group_chat_created=True))
    assert msg.kind.type is MessageKindType.GROUP_CHAT_CREATED
    assert msg.kind.data is None


def test_service_flag_must_be_true():
    with pytest.raises(DeserializeError):
        Message.from_json(message(chat=GROUP_CHAT, delete_chat_photo=False))


def test_migrate_to_chat_id():
    msg = Message.from_json(message(chat=GROUP_CHAT, migrate_to_chat_id=-100123))
    assert msg.kind.type is MessageKindType.MIGRATE_TO_CHAT_ID
    assert msg.kind.data == -100123


def test_migrate_from_chat_id():
    msg = Message.from_json(message(chat=GROUP_CHAT, migrate_from_chat_id=-20))
    assert msg.kind.type is MessageKindType.MIGRATE_FROM_CHAT_ID
    assert msg.kind.data == -20


def test_pinned_message_is_parsed():
    msg = Message.from_json(
        message(chat=GROUP_CHAT, pinned_message=message(chat=GROUP_CHAT, text="pin"))
    )
    assert msg.kind.type is MessageKindType.PINNED_MESSAGE
    assert isinstance(msg.kind.data, Message)
    assert msg.kind.data.kind.data == "pin"


def test_reply_to_channel_post():
    post = ChannelPost.from_json(
        channel_post(text="reply", reply_to_message=channel_post(message_id=3, text="orig"))
    )
    assert isinstance(post.reply_to_message, ChannelPost)
    assert post.reply_to_message.id == MessageId(3)


def test_unknown_kind_keeps_raw_message():
    data = message()
    msg = Message.from_json(data)
    assert msg.kind.type is MessageKindType.UNKNOWN
    assert msg.kind.data == RawMessage.from_json(data)


def test_raw_message_fields():
    raw = RawMessage.from_json(message(text="x", edit_date=1600))
    assert raw.message_id == 5
    assert raw.edit_date == 1600
    assert raw.from_ == User.from_json(USER)
    assert raw.chat.to_chat_ref() == ChatRef.from_chat_id(ChatId(10))


def test_raw_message_requires_mapping():
    with pytest.raises(DeserializeError):
        RawMessage.from_json(["not", "an", "object"])


def test_entities_must_be_list():
    with pytest.raises(DeserializeError, match="entities"):
        Message.from_json(message(text="x", entities={"type": "bold"}))