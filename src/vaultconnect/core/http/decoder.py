"""Response decoding into a typed value and a raw JSON tree."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, Iterator, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from .errors import NetworkError, ParseError, UnsuccessfulStatusError, Utf8DecodeError

logger = logging.getLogger(__name__)

T = TypeVar("T")

SUCCESS_STATUS_CODES = frozenset({httpx.codes.OK, httpx.codes.NO_CONTENT})
_EMPTY_BODY = b"{}"


@dataclass(frozen=True)
class DecodedResponse(Generic[T]):
    """The same payload decoded twice: into ``shape`` and into plain JSON values."""

    typed: T
    raw: Any

    def __iter__(self) -> Iterator[Any]:
        yield self.typed
        yield self.raw


@lru_cache(maxsize=256)
def _adapter(shape: Any) -> TypeAdapter[Any]:
    return TypeAdapter(shape)


def decode_bytes(status_code: int, data: bytes, shape: type[T] | Any) -> DecodedResponse[T]:
    if not data:
        data = _EMPTY_BODY

    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise Utf8DecodeError(exc) from exc

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ParseError(exc) from exc

    typed_error: ValidationError | None = None
    typed: Any = None
    try:
        typed = _adapter(shape).validate_json(data)
    except ValidationError as exc:
        typed_error = exc

    if status_code not in SUCCESS_STATUS_CODES:
        logger.debug("Unsuccessful response status=%s body=%s", status_code, text)
        raise UnsuccessfulStatusError(status_code, text, raw)

    if typed_error is not None:
        raise ParseError(typed_error) from typed_error

    return DecodedResponse(typed=typed, raw=raw)


async def decode_response(response: httpx.Response, shape: type[T] | Any) -> DecodedResponse[T]:
    try:
        data = await response.aread()
    except (httpx.TransportError, httpx.StreamError) as exc:
        raise NetworkError(exc) from exc
    finally:
        await response.aclose()
    return decode_bytes(response.status_code, data, shape)
