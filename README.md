# tgbot_types

A typed data model for the Telegram Bot API. It turns JSON that has already
been decoded (with `json.loads` or the like) into frozen dataclasses, and
builds the JSON-ready dictionaries for the keyboards and inline query results
a bot sends back.

## Installation

```
pip install .
```

## Decoding updates

```python
import json

from tgbot_types.update import Update, UpdateKind

update = Update.from_json(json.loads(payload))
if update.kind is UpdateKind.MESSAGE:
    message = update.data
    print(message.to_source_chat(), message.to_message_id())
```

`UpdateKind` covers `MESSAGE`, `EDITED_MESSAGE`, `CHANNEL_POST`,
`EDITED_CHANNEL_POST`, `INLINE_QUERY` and `CALLBACK_QUERY`; `update.data`
holds a `Message`, `ChannelPost`, `InlineQuery` or `CallbackQuery`. An update
with none of these fields raises an error.

Every decoder raises `tgbot_types.primitive.DeserializeError` (a
`ValueError`) when a field is missing or has the wrong type.

### Messages

`tgbot_types.message` holds `Message` (private chats, groups and
supergroups) and `ChannelPost`. Decode them with `Message.from_json` and
`ChannelPost.from_json`, or with `parse_message_or_channel_post`, which picks
one by the type of the chat. A message's `kind` is a `MessageKind` whose
`type` is a `MessageKindType` (`TEXT`, `PHOTO`, `STICKER`,
`MIGRATE_TO_CHAT_ID`, `PINNED_MESSAGE` and so on) and whose `data` holds the
payload. Kinds this package does not recognise come back as
`MessageKindType.UNKNOWN` carrying the `RawMessage`. Text entities are
`MessageEntity` objects with a `MessageEntityKind`. A forwarded message has a
`Forward` whose `from_` is a `ForwardFromUser` or `ForwardFromChannel`.

### Chats, members and media

- `tgbot_types.chat`: `User`, `Group`, `Supergroup`, `Channel`, `RawChat` and
  `parse_chat`, which returns the class matching the chat's `type`.
- `tgbot_types.chat_member`: `ChatMember` and `ChatMemberStatus`.
- `tgbot_types.media`: `PhotoSize`, `Audio`, `Document`, `Sticker`, `Video`,
  `Voice`, `VideoNote`, `Contact`, `Location`, `Venue`, `UserProfilePhotos`,
  `File` and `ParseMode`.
- `tgbot_types.refs`: typed identifiers (`ChatId`, `UserId`, `GroupId`,
  `SupergroupId`, `ChannelId`, `MessageId`, `CallbackQueryId`,
  `InlineQueryId`), `ChatRef` and `FileRef`.

### Responses

`tgbot_types.response_parameters.parse_response(data, parse_result)` unwraps
an API response envelope. It returns a `ResponseSuccess` holding the result
decoded by `parse_result`, or a `ResponseError` with the description and
optional `ResponseParameters`, and raises if the envelope is ambiguous.

```python
from tgbot_types.chat import User
from tgbot_types.response_parameters import ResponseSuccess, parse_response

response = parse_response(json.loads(body), User.from_json)
if isinstance(response, ResponseSuccess):
    me = response.result
```

## Building reply markup

```python
from tgbot_types.reply_markup import InlineKeyboardButton, InlineKeyboardMarkup

markup = InlineKeyboardMarkup()
row = markup.add_empty_row()
row.append(InlineKeyboardButton.callback("Yes", "answer:yes"))
row.append(InlineKeyboardButton.url("Docs", "https://example.com/docs"))
body = markup.to_json()
```

`ReplyKeyboardMarkup` (rows may hold plain strings), `ReplyKeyboardRemove`
and `ForceReply` work the same way; each has a `to_json` method. A
`KeyboardButton` may request the user's contact or location, not both.
`to_reply_markup` accepts any markup object, or a list of rows of inline
buttons.

## Inline query results

`tgbot_types.inline_query_result` has `InlineQueryResultArticle` and
`InlineQueryResultVoice`, with `InputTextMessageContent` as message content.
`InputContactMessageContent`, `InputVenueMessageContent` and
`InputLocationMessageContent` carry no fields and serialise to empty objects.

## File links

```python
from tgbot_types.media import File

token = "token"
link = File.from_json({"file_id": "abc", "file_path": "photos/1.jpg"}).get_url(token)
```

`get_url` returns `None` when the file has no path. The base URL defaults to
`https://api.telegram.org/`; set the `TELEGRAM_API_URL` environment variable to
point it elsewhere, for example at a fake server in end-to-end tests (see
`tgbot_types.url.telegram_api_url`).

## What this package does not do

It makes no network requests: there is no API client, no method calls such
as sending messages, no polling loop and no webhook server. It decodes what
you receive and encodes what you send; transport is up to you. It does not
serialise incoming objects such as messages back to JSON.

## Running the tests

```
pip install .[test]
pytest
```