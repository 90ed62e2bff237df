"""Keyboards and reply interfaces a bot can attach to its messages."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


@dataclass
class KeyboardButton:
    """One button of a reply keyboard.

    A button may ask for the user's contact or location, but not both.
    """

    text: str
    request_contact: bool = False
    request_location: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.text, str):
            raise TypeError(f"button text must be a string, got {self.text!r}")
        if self.request_contact and self.request_location:
            raise ValueError("a button cannot request both contact and location")

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"text": self.text}
        if self.request_contact:
            result["request_contact"] = True
        if self.request_location:
            result["request_location"] = True
        return result


def _as_keyboard_button(value: KeyboardButton | str) -> KeyboardButton:
    if isinstance(value, KeyboardButton):
        return value
    if isinstance(value, str):
        return KeyboardButton(value)
    raise TypeError(f"expected a KeyboardButton or a string, got {value!r}")


@dataclass
class ReplyKeyboardMarkup:
    """A custom keyboard with reply options.

    Rows may hold plain strings, which become simple buttons.
    """

    keyboard: list[list[KeyboardButton]] = field(default_factory=list)
    resize_keyboard: bool = False
    one_time_keyboard: bool = False
    selective: bool = False

    def __post_init__(self) -> None:
        self.keyboard = [[_as_keyboard_button(b) for b in row] for row in self.keyboard]

    def add_row(self, row: Iterable[KeyboardButton | str]) -> list[KeyboardButton]:
        """Append a row and return it, so more buttons can be added to it."""
        buttons = [_as_keyboard_button(b) for b in row]
        self.keyboard.append(buttons)
        return buttons

    def add_empty_row(self) -> list[KeyboardButton]:
        """Append an empty row and return it."""
        return self.add_row([])

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "keyboard": [[button.to_json() for button in row] for row in self.keyboard]
        }
        if self.resize_keyboard:
            result["resize_keyboard"] = True
        if self.one_time_keyboard:
            result["one_time_keyboard"] = True
        if self.selective:
            result["selective"] = True
        return result


@dataclass
class ReplyKeyboardRemove:
    """Asks clients to remove the current custom keyboard."""

    selective: bool = False

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"remove_keyboard": True}
        if self.selective:
            result["selective"] = True
        return result


class InlineKeyboardButtonKind(Enum):
    """What pressing an inline button does; the value is the JSON field name."""

    URL = "url"
    CALLBACK_DATA = "callback_data"


@dataclass
class InlineKeyboardButton:
    """One button of an inline keyboard."""

    text: str
    kind: InlineKeyboardButtonKind
    data: str

    @classmethod
    def callback(cls, text: str, callback: str) -> InlineKeyboardButton:
        """A button that sends ``callback`` (1-64 bytes) in a callback query."""
        return cls(text, InlineKeyboardButtonKind.CALLBACK_DATA, callback)

    @classmethod
    def url(cls, text: str, url: str) -> InlineKeyboardButton:
        """A button that opens ``url``."""
        return cls(text, InlineKeyboardButtonKind.URL, url)

    def to_json(self) -> dict[str, Any]:
        return {"text": self.text, self.kind.value: self.data}


def _as_inline_button(value: Any) -> InlineKeyboardButton:
    if not isinstance(value, InlineKeyboardButton):
        raise TypeError(f"expected an InlineKeyboardButton, got {value!r}")
    return value


@dataclass
class InlineKeyboardMarkup:
    """An inline keyboard shown right next to its message."""

    inline_keyboard: list[list[InlineKeyboardButton]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.inline_keyboard = [
            [_as_inline_button(b) for b in row] for row in self.inline_keyboard
        ]

    def add_row(self, row: Iterable[InlineKeyboardButton]) -> list[InlineKeyboardButton]:
        """Append a row and return it, so more buttons can be added to it."""
        buttons = [_as_inline_button(b) for b in row]
        self.inline_keyboard.append(buttons)
        return buttons

    def add_empty_row(self) -> list[InlineKeyboardButton]:
        """Append an empty row and return it."""
        return self.add_row([])

    def to_json(self) -> dict[str, Any]:
        return {
            "inline_keyboard": [
                [button.to_json() for button in row] for row in self.inline_keyboard
            ]
        }


@dataclass
class ForceReply:
    """Asks clients to show a reply interface to the user."""

    selective: bool = False

    def to_json(self) -> dict[str, Any]:
        result: dict[str, Any] = {"force_reply": True}
        if self.selective:
            result["selective"] = True
        return result


ReplyMarkup = Union[
    InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply
]

_MARKUP_TYPES = (InlineKeyboardMarkup, ReplyKeyboardMarkup, ReplyKeyboardRemove, ForceReply)


def to_reply_markup(value: Any) -> ReplyMarkup:
    """Coerce ``value`` to a reply markup.

    Markup objects pass through; rows of inline buttons become an
    :class:`InlineKeyboardMarkup`.
    """
    if isinstance(value, _MARKUP_TYPES):
        return value
    if isinstance(value, (list, tuple)):
        return InlineKeyboardMarkup([list(row) for row in value])
    raise TypeError(f"cannot use {value!r} as reply markup")