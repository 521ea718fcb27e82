"""Unix timestamps, day boundaries and calendar cycle checks."""

from __future__ import annotations

import re
import time
from datetime import datetime, timedelta, tzinfo
from datetime import timezone as _dt_timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

__all__ = [
    "TIME_OFFSET",
    "HALF_OFFSET",
    "get_current_timestamp_by_second",
    "unix_second_to_time",
    "unix_nano_second_to_time",
    "unix_mill_second_to_time",
    "get_current_timestamp_by_nano",
    "get_current_timestamp_by_mill",
    "get_cur_day_zero_timestamp",
    "get_cur_day_half_timestamp",
    "get_cur_day_zero_time_format",
    "get_cur_day_half_time_format",
    "get_time_stamp_by_format",
    "time_string_format_time_unix",
    "time_string_to_time",
    "time_to_string",
    "get_current_time_formatted",
    "get_timestamp_by_timezone",
    "days_between_timestamps",
    "is_same_weekday",
    "is_same_day_of_month",
    "is_weekday",
    "is_nth_day_cycle",
    "is_nth_week_cycle",
    "is_nth_month_cycle",
]

TIME_OFFSET = 8 * 3600
HALF_OFFSET = 12 * 3600

_UTC = _dt_timezone.utc
# Unix time of 0001-01-01T00:00:00Z, returned when a date cannot be parsed.
_ZERO_UNIX = -62135596800
_SECONDS_PER_DAY = 86400
_DAY_FORMAT = "%Y-%m-%d"
_STAMP_FORMAT = "%Y-%m-%d_%H-%M-%S"
_DATETIME_FORMAT = "%Y-%m-%d %H:%M:%S"
_DAY_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2}")


def _local(seconds: int) -> datetime:
    """Aware datetime in the local zone for a whole number of Unix seconds."""
    return datetime.fromtimestamp(seconds, tz=_UTC).astimezone()


def _load_location(name: str) -> tzinfo:
    if name in ("", "UTC"):
        return _UTC
    if name == "Local":
        local = datetime.now().astimezone().tzinfo
        return local if local is not None else _UTC
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError, OSError) as exc:
        raise ValueError(f"error loading location: {name!r}: {exc}") from exc


def _elapsed_days(start_timestamp: int) -> float:
    return (time.time() - start_timestamp) / _SECONDS_PER_DAY


def get_current_timestamp_by_second() -> int:
    return int(time.time())


def unix_second_to_time(second: int) -> datetime:
    """Local-zone datetime for Unix seconds."""
    return _local(second)


def unix_nano_second_to_time(nano_second: int) -> datetime:
    """Local-zone datetime for Unix nanoseconds, kept to the microsecond."""
    seconds, rest = divmod(nano_second, 10**9)
    return _local(seconds) + timedelta(microseconds=rest // 1000)


def unix_mill_second_to_time(mill_second: int) -> datetime:
    """Local-zone datetime for Unix milliseconds."""
    seconds, rest = divmod(mill_second, 1000)
    return _local(seconds) + timedelta(milliseconds=rest)


def get_current_timestamp_by_nano() -> int:
    return time.time_ns()


def get_current_timestamp_by_mill() -> int:
    return time.time_ns() // 10**6


def get_cur_day_zero_timestamp() -> int:
    """Midnight of the local date read as UTC, shifted back by eight hours."""
    today = datetime.now().date()
    midnight = datetime(today.year, today.month, today.day, tzinfo=_UTC)
    return int(midnight.timestamp()) - TIME_OFFSET


def get_cur_day_half_timestamp() -> int:
    return get_cur_day_zero_timestamp() + HALF_OFFSET


def get_cur_day_zero_time_format() -> str:
    return _local(get_cur_day_zero_timestamp()).strftime(_STAMP_FORMAT)


def get_cur_day_half_time_format() -> str:
    return _local(get_cur_day_zero_timestamp() + HALF_OFFSET).strftime(_STAMP_FORMAT)


def get_time_stamp_by_format(datetime_text: str) -> str:
    """Unix seconds, as text, of a local "YYYY-MM-DD HH:MM:SS" time."""
    try:
        parsed = datetime.strptime(datetime_text, _DATETIME_FORMAT)
        return str(int(parsed.timestamp()))
    except (ValueError, OverflowError, OSError):
        return str(_ZERO_UNIX)


def time_string_format_time_unix(time_format: str, time_src: str) -> int:
    """Unix seconds of a time parsed with a strptime format; UTC unless it names a zone."""
    try:
        parsed = datetime.strptime(time_src, time_format)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=_UTC)
        return int(parsed.timestamp())
    except (ValueError, OverflowError, OSError):
        return _ZERO_UNIX


def time_string_to_time(time_string: str) -> datetime:
    """Parse a "YYYY-MM-DD" date as UTC midnight."""
    try:
        if not _DAY_PATTERN.fullmatch(time_string):
            raise ValueError("expected YYYY-MM-DD")
        return datetime.strptime(time_string, _DAY_FORMAT).replace(tzinfo=_UTC)
    except ValueError as exc:
        raise ValueError(f"timeStringToTime failed: {exc} (timeString={time_string!r})") from exc


def time_to_string(value: datetime) -> str:
    return value.strftime(_DAY_FORMAT)


def get_current_time_formatted() -> str:
    return datetime.now().strftime(_DATETIME_FORMAT)


def get_timestamp_by_timezone(timezone: str) -> int:
    """Current Unix seconds, after checking that the zone exists."""
    _load_location(timezone)
    return int(time.time())


def days_between_timestamps(timezone: str, timestamp: int) -> int:
    """Whole days elapsed since timestamp, truncated toward zero."""
    _load_location(timezone)
    return int(_elapsed_days(timestamp))


def is_same_weekday(timezone: str, timestamp: int) -> bool:
    """Whether today in the zone falls on the weekday of timestamp (local time)."""
    location = _load_location(timezone)
    return datetime.now(location).weekday() == _local(timestamp).weekday()


def is_same_day_of_month(timezone: str, timestamp: int) -> bool:
    """Whether today in the zone has the day of month of timestamp (local time)."""
    location = _load_location(timezone)
    return datetime.now(location).day == _local(timestamp).day


def is_weekday(timestamp: int) -> bool:
    """Whether timestamp falls on Monday to Friday in local time."""
    return _local(timestamp).weekday() < 5


def is_nth_day_cycle(timezone: str, start_timestamp: int, n: int) -> bool:
    """Whether the whole days since start are a multiple of n."""
    _load_location(timezone)
    return int(_elapsed_days(start_timestamp)) % n == 0


def is_nth_week_cycle(timezone: str, start_timestamp: int, n: int) -> bool:
    """Whether the whole weeks since start are a multiple of n."""
    _load_location(timezone)
    days = int(_elapsed_days(start_timestamp))
    weeks = abs(days) // 7 * (1 if days >= 0 else -1)
    return weeks % n == 0


def is_nth_month_cycle(timezone: str, start_timestamp: int, n: int) -> bool:
    """Whether the calendar months since start are a multiple of n."""
    location = _load_location(timezone)
    now = datetime.now(location)
    start = _local(start_timestamp)
    total_months = (now.year - start.year) * 12 + (now.month - start.month)
    return total_months % n == 0