"""
Registry - Event Timestamps
=============================
Where StandardEvent gets the UTC instant it is stamped with at build time.

The source is a zero-argument callable. Tests install their own with
set_timestamp_source() and restore system time by passing None.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

TimestampSource = Callable[[], datetime]


def system_time() -> datetime:
    return datetime.now(timezone.utc)


_source: TimestampSource = system_time


def set_timestamp_source(source: Optional[TimestampSource]) -> None:
    global _source
    _source = system_time if source is None else source


def now_utc() -> datetime:
    """
    Current instant from the installed source.

    Raises:
        ValueError: the source returned a naive datetime.
    """
    stamp = _source()
    if stamp.tzinfo is None:
        raise ValueError("Event timestamps must be timezone-aware.")
    return stamp
