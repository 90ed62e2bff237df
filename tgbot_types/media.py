"""Files, media and other attachments that messages can carry."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypeVar

from .primitive import (
    DeserializeError,
    optional_int,
    optional_str,
    require_float,
    require_int,
    require_mapping,
    require_str,
)
from .refs import FileRef
from .url import telegram_api_url

T = TypeVar("T")


def _require_field(data: Mapping[str, Any], name: str) -> Any:
    if name not in data:
        raise DeserializeError(f"missing field `{name}`")
    return data[name]


def _list_of(value: Any, parse: Callable[[Any], T], name: str) -> list[T]:
    if not isinstance(value, list):
        raise DeserializeError(
            f"invalid type for field `{name}`: expected a list, got {value!r}"
        )
    return [parse(item) for item in value]


def _optional_thumb(data: Mapping[str, Any]) -> PhotoSize | None:
    value = data.get("thumb")
    return None if value is None else PhotoSize.from_json(value)


@dataclass(frozen=True)
class PhotoSize:
    """One size of a photo or of a file or sticker thumbnail."""

    file_id: str
    width: int
    height: int
    file_size: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> PhotoSize:
        data = require_mapping(data, "a PhotoSize object")
        return cls(
            file_id=require_str(data, "file_id"),
            width=require_int(data, "width"),
            height=require_int(data, "height"),
            file_size=optional_int(data, "file_size"),
        )

    def to_file_ref(self) -> FileRef:
        return FileRef(self.file_id)


@dataclass(frozen=True)
class Audio:
    """An audio file to be treated as music."""

    file_id: str
    duration: int
    performer: str | None = None
    title: str | None = None
    mime_type: str | None = None
    file_size: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> Audio:
        data = require_mapping(data, "an Audio object")
        return cls(
            file_id=require_str(data, "file_id"),
            duration=require_int(data, "duration"),
            performer=optional_str(data, "performer"),
            title=optional_str(data, "title"),
            mime_type=optional_str(data, "mime_type"),
            file_size=optional_int(data, "file_size"),
        )

    def to_file_ref(self) -> FileRef:
        return FileRef(self.file_id)


@dataclass(frozen=True)
class Document:
    """A general file, as opposed to photos, voice messages and audio files."""

    file_id: str
    thumb: PhotoSize | None = None
    file_name: str | None = None
    mime_type: str | None = None
    file_size: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> Document:
        data = require_mapping(data, "a Document object")
        return cls(
            file_id=require_str(data, "file_id"),
            thumb=_optional_thumb(data),
            file_name=optional_str(data, "file_name"),
            mime_type=optional_str(data, "mime_type"),
            file_size=optional_int(data, "file_size"),
        )

    def to_file_ref(self) -> FileRef:
        return FileRef(self.file_id)


@dataclass(frozen=True)
class Sticker:
    """A sticker."""

    file_id: str
    width: int
    height: int
    thumb: PhotoSize | None = None
    emoji: str | None = None
    set_name: str | None = None
    file_size: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> Sticker:
        data = require_mapping(data, "a Sticker object")
        return cls(
            file_id=require_str(data, "file_id"),
            width=require_int(data, "width"),
            height=require_int(data, "height"),
            thumb=_optional_thumb(data),
            emoji=optional_str(data, "emoji"),
            set_name=optional_str(data, "set_name"),
            file_size=optional_int(data, "file_size"),
        )

    def to_file_ref(self) -> FileRef:
        return FileRef(self.file_id)


@dataclass(frozen=True)
class Video:
    """A video file."""

    file_id: str
    width: int
    height: int
    duration: int
    thumb: PhotoSize | None = None
    mime_type: str | None = None
    file_size: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> Video:
        data = require_mapping(data, "a Video object")
        return cls(
            file_id=require_str(data, "file_id"),
            width=require_int(data, "width"),
            height=require_int(data, "height"),
            duration=require_int(data, "duration"),
            thumb=_optional_thumb(data),
            mime_type=optional_str(data, "mime_type"),
            file_size=optional_int(data, "file_size"),
        )

    def to_file_ref(self) -> FileRef:
        return FileRef(self.file_id)


@dataclass(frozen=True)
class Voice:
    """A voice note."""

    file_id: str
    duration: int
    mime_type: str | None = None
    file_size: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> Voice:
        data = require_mapping(data, "a Voice object")
        return cls(
            file_id=require_str(data, "file_id"),
            duration=require_int(data, "duration"),
            mime_type=optional_str(data, "mime_type"),
            file_size=optional_int(data, "file_size"),
        )

    def to_file_ref(self) -> FileRef:
        return FileRef(self.file_id)


@dataclass(frozen=True)
class VideoNote:
    """A round video message."""

    file_id: str
    length: int
    duration: int
    thumb: PhotoSize | None = None
    file_size: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> VideoNote:
        data = require_mapping(data, "a VideoNote object")
        return cls(
            file_id=require_str(data, "file_id"),
            length=require_int(data, "length"),
            duration=require_int(data, "duration"),
            thumb=_optional_thumb(data),
            file_size=optional_int(data, "file_size"),
        )

    def to_file_ref(self) -> FileRef:
        return FileRef(self.file_id)


@dataclass(frozen=True)
class Contact:
    """A phone contact."""

    phone_number: str
    first_name: str
    last_name: str | None = None
    user_id: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> Contact:
        data = require_mapping(data, "a Contact object")
        return cls(
            phone_number=require_str(data, "phone_number"),
            first_name=require_str(data, "first_name"),
            last_name=optional_str(data, "last_name"),
            user_id=optional_int(data, "user_id"),
        )


@dataclass(frozen=True)
class Location:
    """A point on the map."""

    longitude: float
    latitude: float

    @classmethod
    def from_json(cls, data: Any) -> Location:
        data = require_mapping(data, "a Location object")
        return cls(
            longitude=require_float(data, "longitude"),
            latitude=require_float(data, "latitude"),
        )


@dataclass(frozen=True)
class Venue:
    """A venue."""

    location: Location
    title: str
    address: str
    foursquare_id: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> Venue:
        data = require_mapping(data, "a Venue object")
        return cls(
            location=Location.from_json(_require_field(data, "location")),
            title=require_str(data, "title"),
            address=require_str(data, "address"),
            foursquare_id=optional_str(data, "foursquare_id"),
        )


@dataclass(frozen=True)
class UserProfilePhotos:
    """A user's profile pictures, each in up to four sizes."""

    total_count: int
    photos: list[list[PhotoSize]]

    @classmethod
    def from_json(cls, data: Any) -> UserProfilePhotos:
        data = require_mapping(data, "a UserProfilePhotos object")
        return cls(
            total_count=require_int(data, "total_count"),
            photos=_list_of(
                _require_field(data, "photos"),
                lambda row: _list_of(row, PhotoSize.from_json, "photos"),
                "photos",
            ),
        )


@dataclass(frozen=True)
class File:
    """A file ready to be downloaded."""

    file_id: str
    file_size: int | None = None
    file_path: str | None = None

    @classmethod
    def from_json(cls, data: Any) -> File:
        data = require_mapping(data, "a File object")
        return cls(
            file_id=require_str(data, "file_id"),
            file_size=optional_int(data, "file_size"),
            file_path=optional_str(data, "file_path"),
        )

    def get_url(self, token: str) -> str | None:
        """Return the download link, or None when the file has no path."""
        if self.file_path is None:
            return None
        return f"{telegram_api_url()}file/bot{token}/{self.file_path}"


class ParseMode(Enum):
    """How the text of a message is formatted."""

    MARKDOWN = "Markdown"
    HTML = "HTML"

    def to_json(self) -> str:
        return self.value