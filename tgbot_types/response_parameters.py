"""The envelope every Bot API response arrives in."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .primitive import (
    DeserializeError,
    optional_int,
    optional_str,
    require_bool,
    require_mapping,
)

T = TypeVar("T")


@dataclass(frozen=True)
class ResponseParameters:
    """Why a request was unsuccessful."""

    migrate_to_chat_id: int | None = None
    retry_after: int | None = None

    @classmethod
    def from_json(cls, data: Any) -> ResponseParameters:
        """Decode a response parameters object."""
        data = require_mapping(data, "a ResponseParameters object")
        return cls(
            migrate_to_chat_id=optional_int(data, "migrate_to_chat_id"),
            retry_after=optional_int(data, "retry_after"),
        )


@dataclass(frozen=True)
class ResponseSuccess(Generic[T]):
    """A successful request and its result."""

    result: T


@dataclass(frozen=True)
class ResponseError:
    """An unsuccessful request."""

    description: str
    parameters: ResponseParameters | None = None


Response = Union[ResponseSuccess[T], ResponseError]


def parse_response(data: Any, parse_result: Callable[[Any], T]) -> Response[T]:
    """Decode a response envelope, decoding its result with ``parse_result``.

    Raises :class:`DeserializeError` when the envelope is neither a clean
    success nor a clean failure.
    """
    data = require_mapping(data, "a response object")
    ok = require_bool(data, "ok")
    description = optional_str(data, "description")
    raw_result = data.get("result")
    result = None if raw_result is None else parse_result(raw_result)
    raw_parameters = data.get("parameters")
    parameters = (
        None if raw_parameters is None else ResponseParameters.from_json(raw_parameters)
    )

    if not ok and description is not None and result is None:
        return ResponseError(description=description, parameters=parameters)
    if ok and description is None and result is not None:
        return ResponseSuccess(result=result)
    raise DeserializeError("ambiguous response")