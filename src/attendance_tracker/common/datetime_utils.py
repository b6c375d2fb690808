from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta, timezone
from typing import Any, Optional, Union

from ..core.constants import UNSET_TIME


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def format_iso_date(value: date) -> str:
    return value.strftime("%Y-%m-%d")


def parse_hhmm(value: str) -> time:
    return datetime.strptime(value.strip(), "%H:%M").time()


def normalize_time(value: Any) -> Optional[time]:
    """Normalize TIME column values coming from either store.

    mysql-connector can return TIME as datetime.time or datetime.timedelta,
    and the Supabase client returns strings such as '08:30:00'.
    """

    if value is None or value == "":
        return None

    if isinstance(value, time):
        return value

    if isinstance(value, timedelta):
        total_seconds = int(value.total_seconds()) % 86400
        return time(hour=total_seconds // 3600, minute=(total_seconds % 3600) // 60, second=total_seconds % 60)

    if isinstance(value, str):
        parts = value.strip().split(":")
        if len(parts) < 2:
            raise ValueError(f"Invalid time string: {value!r}")
        seconds = int(float(parts[2])) if len(parts) >= 3 and parts[2] else 0
        return time(hour=int(parts[0]), minute=int(parts[1]), second=seconds)

    raise TypeError(f"Unsupported TIME value type: {type(value)!r}")


def normalize_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value)[:10])


def format_time(value: Optional[Union[datetime, time]]) -> str:
    """Render a clock time as 12-hour ``hh:mm AM/PM``; unset renders as ``–``."""
    if value is None:
        return UNSET_TIME
    return value.strftime("%I:%M %p")


def display_time(value: Optional[str]) -> str:
    """Display form of an already formatted time, where blank or unset is ``–``."""
    return value or UNSET_TIME


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def shift_month(year: int, month: int, delta: int) -> tuple[int, int]:
    """Move (year, month) by `delta` months, crossing year boundaries."""
    index = year * 12 + (month - 1) + delta
    return index // 12, index % 12 + 1


def is_weekend(value: date) -> bool:
    return value.weekday() >= 5


def epoch_millis(value: date) -> int:
    """Milliseconds since the epoch for midnight UTC of `value`."""
    midnight = datetime.combine(value, time.min, tzinfo=timezone.utc)
    return int(midnight.timestamp() * 1000)


def month_label(value: date) -> str:
    """Month heading such as ``July 2026``."""
    return value.strftime("%B %Y")
