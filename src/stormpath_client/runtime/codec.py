"""
JSON encoding for request payloads.

Produces the compact UTF-8 JSON bytes sent as request bodies. Pydantic models,
at the top level or nested in dicts and lists, are dumped by alias with unset
optional fields left out.
"""

from __future__ import annotations
import json
from typing import Any

from pydantic import BaseModel
from pydantic_core import PydanticSerializationError

from .errors import SerializationError


def _dump_model(value: Any) -> Any:
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(value: Any) -> bytes:
    """
    Encode a payload as compact JSON bytes.

    Args:
        value: dict, list, scalar or pydantic model, possibly nested

    Returns:
        UTF-8 encoded JSON

    Raises:
        SerializationError: If the value cannot be represented as JSON
    """
    try:
        return json.dumps(
            value,
            default=_dump_model,
            separators=(",", ":"),
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError, PydanticSerializationError) as e:
        raise SerializationError(
            f"Cannot encode {type(value).__name__} payload as JSON",
            details={"type": type(value).__name__},
            cause=e,
        ) from e


def decode_json(data: bytes) -> Any:
    """Decode a JSON response body, returning None for an empty body."""
    if not data:
        return None
    return json.loads(data.decode("utf-8"))


__all__ = ["encode_json", "decode_json"]
