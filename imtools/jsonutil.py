"""JSON encoding and decoding with compact, deterministic output."""

from __future__ import annotations

import base64
import dataclasses
import json
from collections.abc import Mapping
from typing import Any

__all__ = [
    "JsonError",
    "json_marshal",
    "json_unmarshal",
    "struct_to_json_string",
    "json_string_to_struct",
]

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class JsonError(ValueError):
    """Raised when a value cannot be encoded to or decoded from JSON."""


def _map_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, int) and not isinstance(key, bool):
        return str(key)
    raise TypeError(f"unsupported map key type: {type(key).__name__}")


def _prepare(value: Any) -> Any:
    """Turn a value into plain JSON data: map keys sorted, fields kept in order."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {field.name: _prepare(getattr(value, field.name)) for field in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        items = ((_map_key(k), _prepare(v)) for k, v in value.items())
        return dict(sorted(items, key=lambda kv: kv[0]))
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, (list, tuple)):
        return [_prepare(item) for item in value]
    return value


def _escape_html(text: str) -> str:
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def _reject_constant(token: str) -> Any:
    raise ValueError(f"invalid JSON token {token!r}")


def json_marshal(value: Any) -> bytes:
    """Encode a value as compact JSON bytes."""
    try:
        text = json.dumps(
            _prepare(value),
            ensure_ascii=False,
            allow_nan=False,
            separators=(",", ":"),
        )
        return _escape_html(text).encode("utf-8")
    except (TypeError, ValueError, UnicodeEncodeError) as exc:
        raise JsonError(f"json marshal failed: {exc}") from exc


def json_unmarshal(data: bytes | str) -> Any:
    """Decode JSON bytes or text into Python data."""
    try:
        return json.loads(data, parse_constant=_reject_constant)
    except (TypeError, ValueError) as exc:
        raise JsonError(f"json unmarshal failed: {exc}") from exc


def struct_to_json_string(param: Any) -> str:
    """Encode a value as a JSON string, giving an empty string on failure."""
    try:
        return json_marshal(param).decode("utf-8")
    except JsonError:
        return ""


def json_string_to_struct(text: str) -> Any:
    """Decode a JSON string into Python data."""
    return json_unmarshal(text)