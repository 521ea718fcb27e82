"""Coloured, time-stamped console messages."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Any

__all__ = [
    "COLOR_BLUE",
    "COLOR_GREEN",
    "COLOR_RED",
    "COLOR_RESET",
    "print_blue_two_line",
    "print_blue",
    "print_green_two_line",
    "print_green",
    "print_red",
    "print_red_no_timestamp",
    "print_green_no_timestamp",
    "print_red_to_stderr",
    "print_green_to_stdout",
]

COLOR_BLUE = "\033[0;34m"
COLOR_GREEN = "\033[0;32m"
COLOR_RED = "\033[0;31m"
COLOR_RESET = "\033[0m"

_PLAIN_RED = "\033[31m"
_PLAIN_GREEN = "\033[32m"


def _timestamp() -> str:
    return datetime.now().astimezone().strftime("[%Y-%m-%d %H:%M:%S %Z]")


def _colored(color: str, message: str) -> str:
    return f"{color}{message}{COLOR_RESET}"


def _sprint(args: tuple[Any, ...]) -> str:
    """Join values, with a space only between two adjacent non-string values."""
    parts: list[str] = []
    previous_is_str = True
    for position, value in enumerate(args):
        is_str = isinstance(value, str)
        if position > 0 and not is_str and not previous_is_str:
            parts.append(" ")
        parts.append(str(value))
        previous_is_str = is_str
    return "".join(parts)


def print_blue_two_line(message: str) -> None:
    print(_timestamp(), flush=True)
    print(_colored(COLOR_BLUE, message), flush=True)


def print_blue(message: str) -> None:
    print(f"{_timestamp()} {_colored(COLOR_BLUE, message)}", flush=True)


def print_green_two_line(message: str) -> None:
    print(_timestamp(), flush=True)
    print(_colored(COLOR_GREEN, message), flush=True)


def print_green(message: str) -> None:
    print(f"{_timestamp()} {_colored(COLOR_GREEN, message)}", flush=True)


def print_red(message: str) -> None:
    print(f"{_timestamp()} {_colored(COLOR_RED, message)}", flush=True)


def print_red_no_timestamp(message: str) -> None:
    print(_colored(COLOR_RED, message), flush=True)


def print_green_no_timestamp(message: str) -> None:
    print(_colored(COLOR_GREEN, message), flush=True)


def print_red_to_stderr(*args: Any) -> int:
    """Write the values in red to standard error; return the characters written."""
    text = f"{_PLAIN_RED}{_sprint(args)}{COLOR_RESET}"
    sys.stderr.write(text)
    sys.stderr.flush()
    return len(text)


def print_green_to_stdout(*args: Any) -> int:
    """Write the values in green to standard output; return the characters written."""
    text = f"{_PLAIN_GREEN}{_sprint(args)}{COLOR_RESET}"
    sys.stdout.write(text)
    sys.stdout.flush()
    return len(text)