"""String, number and list helpers."""

from __future__ import annotations

import os
import re
import sys
import zlib
from collections.abc import Hashable, Iterable, Sequence
from typing import Any, TypeVar

from imtools.jsonutil import JsonError, json_marshal

__all__ = [
    "int_to_string",
    "string_to_int",
    "string_to_int64",
    "string_to_int32",
    "int32_to_string",
    "uint32_to_string",
    "int64_to_string",
    "is_contain",
    "interface_array_to_string_array",
    "struct_to_json_bytes",
    "remove_duplicate_element",
    "remove_duplicate",
    "is_duplicate_string_slice",
    "with_message",
    "get_self_func_name",
    "get_func_name",
    "intersect",
    "difference",
    "get_hash_code",
    "format_string",
    "camel_case_to_space_separated",
    "upper_first",
    "lower_first",
    "is_alphanumeric",
    "is_valid_email",
]

T = TypeVar("T", bound=Hashable)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_DECIMAL = re.compile(r"[+-]?[0-9]+")
_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")


class _WrappedError(Exception):
    """An error annotated with the location it passed through."""

    def __init__(self, message: str, cause: BaseException) -> None:
        super().__init__(f"{message}: {cause}")
        self.message = message
        self.cause = cause
        self.__cause__ = cause


def _parse_int64(text: str) -> int:
    """Parse a decimal integer clamped to 64 bits; 0 when malformed."""
    if not _DECIMAL.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(text)))


def int_to_string(value: int) -> str:
    return str(int(value))


def string_to_int(text: str) -> int:
    return _parse_int64(text)


def string_to_int64(text: str) -> int:
    return _parse_int64(text)


def string_to_int32(text: str) -> int:
    """Parse as 64 bits, then truncate to a signed 32-bit value."""
    return ((_parse_int64(text) + 2**31) % 2**32) - 2**31


def int32_to_string(value: int) -> str:
    return str(int(value))


def uint32_to_string(value: int) -> str:
    return str(int(value))


def int64_to_string(value: int) -> str:
    return str(int(value))


def is_contain(target: Any, items: Iterable[Any]) -> bool:
    return target in items


def interface_array_to_string_array(data: Iterable[Any]) -> list[str]:
    """Return the items as strings; every item must already be a string."""
    result = []
    for item in data:
        if not isinstance(item, str):
            raise TypeError(f"expected str, got {type(item).__name__}")
        result.append(item)
    return result


def struct_to_json_bytes(param: Any) -> bytes:
    try:
        return json_marshal(param)
    except JsonError:
        return b""


def remove_duplicate_element(id_list: Iterable[str]) -> list[str]:
    return list(dict.fromkeys(id_list))


def remove_duplicate(items: Iterable[T]) -> list[T]:
    return list(dict.fromkeys(items))


def is_duplicate_string_slice(items: Sequence[Hashable]) -> bool:
    seen: set[Hashable] = set()
    for item in items:
        if item in seen:
            return True
        seen.add(item)
    return False


def with_message(err: BaseException | None, message: str) -> BaseException | None:
    """Annotate an error with the calling function, its line and a message."""
    if err is None:
        return None
    frame = sys._getframe(1)
    source = os.path.splitext(os.path.basename(frame.f_code.co_filename))[0]
    location = f"{source}.{frame.f_code.co_name}()@{frame.f_lineno}: "
    return _WrappedError("==> " + location + message, err)


def get_self_func_name() -> str:
    """Name of the function that calls this one."""
    return sys._getframe(1).f_code.co_name


def get_func_name(*args: int) -> str:
    """Name of the caller, or of a function further up the stack."""
    skip = args[0] + 1 if args else 1
    if skip < 0:
        return ""
    try:
        frame = sys._getframe(skip)
    except ValueError:
        return ""
    return frame.f_code.co_name


def intersect(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Items of second that also appear in first, in the order of second."""
    present = set(first)
    return [item for item in second if item in present]


def difference(first: Sequence[T], second: Sequence[T]) -> list[T]:
    """Items of either sequence that are not in both."""
    common = set(intersect(first, second))
    return [item for item in first if item not in common] + [
        item for item in second if item not in common
    ]


def get_hash_code(text: str) -> int:
    return zlib.crc32(text.encode("utf-8"))


def format_string(text: str, length: int, align_left: bool) -> str:
    """Truncate to length bytes, or pad to length characters."""
    if length < 0:
        raise ValueError("length must not be negative")
    encoded = text.encode("utf-8")
    if len(encoded) > length:
        return encoded[:length].decode("utf-8", errors="ignore")
    return text.ljust(length) if align_left else text.rjust(length)


def _single_upper(char: str) -> str:
    upper = char.upper()
    return upper if len(upper) == 1 else char


def _single_lower(char: str) -> str:
    lower = char.lower()
    return lower if len(lower) == 1 else char


def camel_case_to_space_separated(text: str) -> str:
    parts = []
    for position, char in enumerate(text):
        if position > 0 and char.isupper():
            parts.append(" ")
        parts.append(_single_lower(char))
    return "".join(parts)


def upper_first(text: str) -> str:
    return _single_upper(text[0]) + text[1:] if text else text


def lower_first(text: str) -> str:
    return _single_lower(text[0]) + text[1:] if text else text


def is_alphanumeric(text: str) -> bool:
    return all(char.isalpha() or char.isdecimal() for char in text)


def is_valid_email(email: str) -> bool:
    return _EMAIL.fullmatch(email) is not None