"""Standard Base64 encoding of text."""

from __future__ import annotations

import base64
import binascii

__all__ = ["DecodeError", "base64_encode", "base64_decode"]


class DecodeError(ValueError):
    """Raised when input is not valid Base64."""


def base64_encode(data: str) -> str:
    """Encode text with the standard padded Base64 alphabet."""
    return base64.b64encode(data.encode("utf-8", "surrogateescape")).decode("ascii")


def base64_decode(data: str) -> str:
    """Decode standard padded Base64; line breaks in the input are ignored."""
    cleaned = data.replace("\r", "").replace("\n", "")
    try:
        raw = base64.b64decode(cleaned, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise DecodeError(f"DecodeString failed: {exc} (data={data!r})") from exc
    return raw.decode("utf-8", "surrogateescape")