"""Results a bot returns in answer to an inline query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Union

from .media import ParseMode
from .reply_markup import ReplyMarkup, to_reply_markup


@dataclass
class InputTextMessageContent:
    """Text content of a message sent as the result of an inline query."""

    message_text: str
    parse_mode: ParseMode | None = None
    disable_web_page_preview: bool = False

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"message_text": self.message_text}
        if self.parse_mode is not None:
            result["parse_mode"] = self.parse_mode.to_json()
        if self.disable_web_page_preview:
            result["disable_web_page_preview"] = True
        return result


@dataclass
class InputContactMessageContent:
    """Contact content of a message sent as the result of an inline query."""

    def to_json(self) -> dict[str, Any]:
        return {}


@dataclass
class InputVenueMessageContent:
    """Venue content of a message sent as the result of an inline query."""

    def to_json(self) -> dict[str, Any]:
        return {}


@dataclass
class InputLocationMessageContent:
    """Location content of a message sent as the result of an inline query."""

    def to_json(self) -> dict[str, Any]:
        return {}


InputMessageContent = Union[
    InputTextMessageContent,
    InputLocationMessageContent,
    InputVenueMessageContent,
    InputContactMessageContent,
]

_CONTENT_TYPES = (
    InputTextMessageContent,
    InputLocationMessageContent,
    InputVenueMessageContent,
    InputContactMessageContent,
)


@dataclass
class InlineQueryResultArticle:
    """A link to an article or web page."""

    id: str
    title: str
    input_message_content: InputMessageContent
    description: str | None = None
    reply_markup: ReplyMarkup | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.input_message_content, _CONTENT_TYPES):
            raise TypeError(
                f"expected input message content, got {self.input_message_content!r}"
            )
        if self.reply_markup is not None:
            self.reply_markup = to_reply_markup(self.reply_markup)

    def to_json(self) -> dict[str, Any]:
        return {
            "type": "article",
            "id": self.id,
            "title": self.title,
            "input_message_content": self.input_message_content.to_json(),
            "description": self.description,
            "reply_markup": (
                None if self.reply_markup is None else self.reply_markup.to_json()
            ),
        }


@dataclass
class InlineQueryResultVoice:
    """A link to a voice recording."""

    id: str
    title: str
    voice_url: str

    def to_json(self) -> dict[str, Any]:
        return {
            "type": "voice",
            "id": self.id,
            "title": self.title,
            "voice_url": self.voice_url,
        }


InlineQueryResult = Union[InlineQueryResultArticle, InlineQueryResultVoice]