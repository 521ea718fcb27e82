"""Message and operation identifier generation."""

from __future__ import annotations

import random
import time

from imtools.encrypt import md5
from imtools.stringutil import int64_to_string
from imtools.timeutil import get_current_timestamp_by_nano

__all__ = ["get_msg_id_by_md5", "operation_id_generator"]


def get_msg_id_by_md5(send_id: str) -> str:
    """MD5 hex digest of the current time, the sender and a random number."""
    stamp = int64_to_string(get_current_timestamp_by_nano())
    noise = random.randrange(get_current_timestamp_by_nano())
    return md5(stamp + send_id + int64_to_string(noise))


def operation_id_generator() -> str:
    """Decimal ID made from the current nanosecond time plus a random 32-bit number."""
    return str(time.time_ns() + random.getrandbits(32))