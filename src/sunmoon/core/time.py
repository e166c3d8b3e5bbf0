from __future__ import annotations

from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Optional, Union

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .errors import UnknownTimeZoneError

TzLike = Union[tzinfo, str, None]
WhenLike = Union[datetime, date]

JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC
SECONDS_PER_DAY = 86400.0


# ============================================================
# datetime(aware) <-> JD
# ============================================================

def to_julian_day(instant: datetime) -> float:
    """
    datetime -> JD. Requires a timezone-aware datetime.
      JD = unix_seconds / 86400 + 2440587.5
    """
    if instant.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return instant.timestamp() / SECONDS_PER_DAY + JD_UNIX_EPOCH


def from_julian_day(jd: float) -> datetime:
    """
    JD -> timezone-aware datetime in UTC.
    """
    t = (jd - JD_UNIX_EPOCH) * SECONDS_PER_DAY
    # timedelta arithmetic rather than fromtimestamp(): valid before 1970 on all platforms
    return datetime(1970, 1, 1, tzinfo=timezone.utc) + timedelta(seconds=t)


# ============================================================
# Time zones and civil days
# ============================================================

def resolve_tz(tz: TzLike) -> tzinfo:
    """
    Accepts a tzinfo, an IANA zone name, or None (UTC).
    """
    if tz is None:
        return timezone.utc
    if isinstance(tz, tzinfo):
        return tz
    try:
        return ZoneInfo(tz)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise UnknownTimeZoneError(f"Unknown time zone {tz!r}") from e


def to_instant(when: WhenLike, tz: tzinfo) -> datetime:
    """
    Normalize a caller-supplied `when` to an aware datetime.

    - aware datetime: returned unchanged
    - naive datetime: wall-clock time in `tz`
    - date: local noon of that civil day in `tz`
    """
    if isinstance(when, datetime):
        if when.tzinfo is None:
            return when.replace(tzinfo=tz)
        return when
    return datetime.combine(when, time(12, 0), tzinfo=tz)


def local_day(instant: datetime, tz: tzinfo) -> date:
    """Civil date of an aware instant as seen in `tz`."""
    return instant.astimezone(tz).date()


def local_midnight(day: date, tz: tzinfo) -> datetime:
    """Start of the civil day `day` in `tz` (aware)."""
    return datetime.combine(day, time(0, 0), tzinfo=tz)


def now_utc(now: Optional[datetime] = None) -> datetime:
    """Current instant, unless the caller pins one."""
    if now is not None:
        if now.tzinfo is None:
            raise ValueError("now must be timezone-aware")
        return now
    return datetime.now(timezone.utc)
