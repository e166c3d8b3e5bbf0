"""
sunmoon.engines.daylight
------------------------
Daylight conveniences over a sunrise/sunset pair: the daylight flag,
day length, remaining daylight, position along the day arc, and the
short strings a display shows for them.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta, tzinfo
from typing import Optional


def is_currently_daylight(now: datetime, sunrise: Optional[datetime], sunset: Optional[datetime]) -> bool:
    """True iff both events exist and sunrise <= now <= sunset."""
    if sunrise is None or sunset is None:
        return False
    return sunrise <= now <= sunset


def day_length(sunrise: Optional[datetime], sunset: Optional[datetime]) -> timedelta:
    """
    sunset - sunrise, never negative. The first set of a local day can come
    before its first rise (sun setting just after midnight near the start of
    the midnight-sun season); that day reports 0.
    """
    if sunrise is None or sunset is None:
        raise ValueError("day length needs both a sunrise and a sunset")
    return max(timedelta(0), sunset - sunrise)


def daylight_remaining(now: datetime, sunrise: Optional[datetime], sunset: Optional[datetime]) -> Optional[timedelta]:
    """Time left until sunset while it is daylight, else None."""
    if not is_currently_daylight(now, sunrise, sunset):
        return None
    return sunset - now


def day_progress(now: datetime, sunrise: Optional[datetime], sunset: Optional[datetime]) -> float:
    """Fraction of the daylight arc elapsed: 0 before sunrise, 1 after sunset."""
    total = day_length(sunrise, sunset)
    if now < sunrise:
        return 0.0
    if now > sunset or total <= timedelta(0):
        return 1.0
    return (now - sunrise) / total


# ============================================================
# Display strings
# ============================================================

def format_day_length(length: timedelta) -> str:
    """'11h 58m'"""
    secs = max(0.0, length.total_seconds())
    hours = int(secs / 3600)
    minutes = int((secs % 3600) / 60)
    return f"{hours}h {minutes:02d}m"


def format_daylight_remaining(now: datetime, sunrise: Optional[datetime], sunset: Optional[datetime]) -> str:
    """'2h 05m 09s', '5m 09s' or 'Nighttime'."""
    remaining = daylight_remaining(now, sunrise, sunset)
    if remaining is None:
        return "Nighttime"
    secs = remaining.total_seconds()
    hours = int(secs / 3600)
    minutes = int((secs % 3600) / 60)
    seconds = int(secs % 60)
    if hours > 0:
        return f"{hours}h {minutes:02d}m {seconds:02d}s"
    return f"{minutes}m {seconds:02d}s"


def format_day_length_change(today: timedelta, tomorrow: timedelta) -> str:
    """Signed change from today's to tomorrow's day length: '+1m 3s', '-42s', 'Same'."""
    diff = (tomorrow - today).total_seconds()
    # truncate toward zero, remainder keeps the sign of diff
    minutes = math.trunc(diff / 60)
    seconds = math.trunc(math.fmod(diff, 60))

    if minutes != 0:
        sign = "+" if minutes > 0 else ""
        return f"{sign}{minutes}m {abs(seconds)}s"
    if seconds > 0:
        return f"+{seconds}s"
    if seconds < 0:
        return f"{seconds}s"
    return "Same"


def format_clock(instant: Optional[datetime], tz: Optional[tzinfo] = None, *, missing: str = "--") -> str:
    """Short 12-hour clock time, e.g. '6:58 AM'."""
    if instant is None:
        return missing
    local = instant.astimezone(tz) if tz is not None else instant
    hour12 = local.hour % 12 or 12
    suffix = "AM" if local.hour < 12 else "PM"
    return f"{hour12}:{local.minute:02d} {suffix}"
