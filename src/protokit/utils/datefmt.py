"""Wall-clock timestamp formatting with millisecond resolution."""

from __future__ import annotations

import re
from datetime import datetime
from typing import Callable

__all__ = ["TIMESTAMP_RE", "format_timestamp", "get_current_timestamp"]

Clock = Callable[[], datetime]

TIMESTAMP_RE = re.compile(r"^([01]\d|2[0-3]):[0-5]\d:[0-5]\d\.\d{3}$")


def format_timestamp(moment: datetime) -> str:
    """Format ``moment`` as ``HH:MM:SS.mmm``.

    Milliseconds are truncated, not rounded, so the result never rolls over
    into the next second.
    """

    return f"{moment:%H:%M:%S}.{moment.microsecond // 1000:03d}"


def get_current_timestamp(now: Clock | None = None) -> str:
    """Return the current local time as ``HH:MM:SS.mmm`` (e.g. ``23:47:24.805``).

    ``now`` may be passed to freeze the clock in tests; it defaults to
    :meth:`datetime.now`, which reports local time.
    """

    clock = now if now is not None else datetime.now
    return format_timestamp(clock())
