"""
Envelope codec for the panel's tRPC convention.

Requests are wrapped as ``{"json": payload}`` (GET: ``?input=``, POST: body).
Successful responses arrive as ``{"result": {"data": {"json": value}}}``.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Any, Dict, Generic, Optional, Type, TypeVar

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError, to_jsonable_python

from .errors import EasypanelBuildError, EasypanelDecodeError

T = TypeVar("T")


class Envelope(BaseModel, Generic[T]):
    value: T = Field(alias="json")
    meta: Optional[Any] = None

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class _Data(BaseModel, Generic[T]):
    data: Envelope[T]

    model_config = ConfigDict(extra="ignore")


class RestResponse(BaseModel, Generic[T]):
    """Generic success envelope: result.data.json."""

    result: _Data[T]

    model_config = ConfigDict(extra="ignore")

    @property
    def value(self) -> T:
        return self.result.data.value


@lru_cache(maxsize=None)
def _response_adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(RestResponse[result_type])


@lru_cache(maxsize=None)
def _input_adapter(result_type: Any) -> TypeAdapter:
    return TypeAdapter(Envelope[result_type])


def to_wire(payload: Any) -> Any:
    """Convert models/containers into JSON-ready values (camelCase, no None fields)."""
    try:
        return to_jsonable_python(payload, by_alias=True, exclude_none=True)
    except PydanticSerializationError as exc:
        raise EasypanelBuildError(f"Payload is not JSON serializable: {exc}") from exc


def encode(payload: Any = None) -> bytes:
    """Serialize ``{"json": payload}`` compactly. The json key is always emitted."""
    envelope = {"json": to_wire(payload)}
    return json.dumps(envelope, separators=(",", ":")).encode("utf-8")


def decode(raw: bytes | str, result_type: Type[T] | Any) -> T:
    """Unwrap ``result.data.json`` from a success body as result_type."""
    try:
        parsed = _response_adapter(result_type).validate_json(raw)
    except ValidationError as exc:
        raise EasypanelDecodeError(f"Response did not match envelope: {exc}") from exc
    except TypeError as exc:
        raise EasypanelDecodeError(
            f"Cannot decode into {result_type!r}: {exc}"
        ) from exc
    return parsed.value


def decode_input(raw: bytes | str, result_type: Type[T] | Any) -> T:
    """Unwrap a request envelope ``{"json": ...}`` (inverse of encode)."""
    try:
        parsed = _input_adapter(result_type).validate_json(raw)
    except ValidationError as exc:
        raise EasypanelDecodeError(f"Input did not match envelope: {exc}") from exc
    return parsed.value


def wrap_response(value: Any) -> Dict[str, Any]:
    """Build the success envelope the server sends for value."""
    return {"result": {"data": {"json": to_wire(value)}}}


__all__ = [
    "Envelope",
    "RestResponse",
    "encode",
    "decode",
    "decode_input",
    "wrap_response",
    "to_wire",
]
