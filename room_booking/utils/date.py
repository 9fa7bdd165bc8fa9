"""
Date and time helpers for timezone-aware timestamps.
"""

from datetime import datetime, timedelta, timezone
from typing import Optional

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


def is_aware(value: Optional[datetime]) -> bool:
    """True when value carries a usable UTC offset."""
    return (
        isinstance(value, datetime)
        and value.tzinfo is not None
        and value.utcoffset() is not None
    )


def to_utc_micros(value: datetime) -> int:
    """
    Convert an aware datetime to integer microseconds since the epoch.

    Used as the comparable storage key so that instants written with
    different offsets order correctly.
    """
    return (value - _EPOCH) // timedelta(microseconds=1)


def to_storage(value: datetime) -> str:
    """Serialize keeping the original offset."""
    return value.isoformat()


def from_storage(value: str) -> datetime:
    """Parse a value written by to_storage."""
    return datetime.fromisoformat(value)
