from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from functools import lru_cache
from typing import List, Optional

from .core.engine import BodyRegistry, BodySpec
from .core.time import TzLike, WhenLike, local_day, now_utc, resolve_tz, to_instant, to_julian_day
from .core.types import MoonPhase, MoonTimes, Observer, RiseSet, SunEvent, SunTimes
from .engines.altitude import body_altitude_deg
from .engines.daylight import day_length, is_currently_daylight
from .engines.horizon import find_rise_set
from .engines.phase import current_phase

logger = logging.getLogger(__name__)

_registry: Optional[BodyRegistry] = None

def set_registry(reg: BodyRegistry) -> None:
    global _registry
    _registry = reg
    clear_cache()

def _reg() -> BodyRegistry:
    if _registry is None:
        raise RuntimeError("Body registry not initialized")
    return _registry

def list_bodies() -> List[str]:
    return _reg().list()

def get_body(name: str) -> BodySpec:
    return _reg().get(name)

def register_body(spec: BodySpec, *, overwrite: bool = False) -> None:
    _reg().register(spec, overwrite=overwrite)
    clear_cache()


# ============================================================
# Memoized rise/set (deterministic per body, observer and civil day)
# ============================================================

@lru_cache(maxsize=512)
def _rise_set(body: BodySpec, observer: Observer, day: date) -> RiseSet:
    logger.debug("rise/set cache miss: %s %s (%.4f, %.4f)", body.name, day, observer.lat_deg, observer.lon_deg)
    return find_rise_set(body, observer, day)

def clear_cache() -> None:
    _rise_set.cache_clear()


def _sun_times_for_day(observer: Observer, day: date, now: datetime) -> SunTimes:
    rs = _rise_set(_reg().get("sun"), observer, day)

    if rs.rise is not None and rs.set is not None:
        length: Optional[timedelta] = day_length(rs.rise, rs.set)
    elif rs.always_up:
        length = timedelta(hours=24)
    elif rs.always_down:
        length = timedelta(0)
    else:
        length = None

    return SunTimes(
        sunrise=rs.rise,
        sunset=rs.set,
        is_currently_daylight=is_currently_daylight(now, rs.rise, rs.set),
        day_length=length,
    )


# ============================================================
# Sun
# ============================================================

def calculate_sun_times(
    when: WhenLike,
    latitude: float,
    longitude: float,
    time_zone: TzLike = None,
    *,
    now: Optional[datetime] = None,
) -> SunTimes:
    """
    Sunrise/sunset on the local civil day containing `when`.

    The scan window is the civil day in `time_zone` (UTC when omitted), so
    pass the observer's own zone: with UTC at a far-from-Greenwich longitude
    the window splits the daylight arc and the first set precedes the first
    rise (day_length is then 0).

    is_currently_daylight is evaluated at `now`; when omitted, at `when`
    itself if it is a datetime, otherwise at the current clock time.
    """
    observer = Observer.create(latitude, longitude, time_zone)
    instant = to_instant(when, observer.tz)
    if now is None:
        now = instant if isinstance(when, datetime) else now_utc()
    return _sun_times_for_day(observer, local_day(instant, observer.tz), now)


def get_next_sun_event(
    latitude: float,
    longitude: float,
    time_zone: TzLike = None,
    *,
    now: Optional[datetime] = None,
    search_days: int = 2,
) -> Optional[SunEvent]:
    """
    The next sunrise or sunset after `now` (default: the current time),
    looking at most `search_days` local days ahead starting today.
    None when no event exists in that window (polar day or night).
    """
    if search_days < 1:
        raise ValueError(f"search_days must be at least 1, got {search_days}")
    observer = Observer.create(latitude, longitude, time_zone)
    current = now_utc(now)
    today = local_day(current, observer.tz)
    sun = _reg().get("sun")

    first = _rise_set(sun, observer, today)
    daylight = is_currently_daylight(current, first.rise, first.set)

    for offset in range(search_days):
        rs = first if offset == 0 else _rise_set(sun, observer, today + timedelta(days=offset))
        upcoming = sorted(
            (t, kind)
            for kind, t in (("sunrise", rs.rise), ("sunset", rs.set))
            if t is not None and t > current
        )
        if upcoming:
            t, kind = upcoming[0]
            return SunEvent(event=kind, time=t, is_currently_daylight=daylight)

    logger.debug("no sun event within %d day(s) of %s", search_days, current.isoformat())
    return None


def day_length_change(
    when: WhenLike,
    latitude: float,
    longitude: float,
    time_zone: TzLike = None,
) -> Optional[timedelta]:
    """Tomorrow's day length minus today's; None if either is undefined."""
    observer = Observer.create(latitude, longitude, time_zone)
    instant = to_instant(when, observer.tz)
    day = local_day(instant, observer.tz)
    today = _sun_times_for_day(observer, day, instant)
    tomorrow = _sun_times_for_day(observer, day + timedelta(days=1), instant)
    if today.day_length is None or tomorrow.day_length is None:
        return None
    return tomorrow.day_length - today.day_length


def sun_altitude(when: WhenLike, latitude: float, longitude: float, time_zone: TzLike = None) -> float:
    """Apparent altitude of the Sun (degrees) relative to the rise/set horizon."""
    return _altitude("sun", when, latitude, longitude, time_zone)


# ============================================================
# Moon
# ============================================================

def get_current_moon_phase(when: WhenLike, time_zone: TzLike = None) -> MoonPhase:
    instant = to_instant(when, resolve_tz(time_zone))
    return current_phase(to_julian_day(instant))


def calculate_moon_times(
    when: WhenLike,
    latitude: float,
    longitude: float,
    time_zone: TzLike = None,
) -> MoonTimes:
    """
    First moonrise and first moonset on the local civil day containing `when`,
    the day being taken in `time_zone` (UTC when omitted).
    """
    observer = Observer.create(latitude, longitude, time_zone)
    day = local_day(to_instant(when, observer.tz), observer.tz)
    rs = _rise_set(_reg().get("moon"), observer, day)
    return MoonTimes(moonrise=rs.rise, moonset=rs.set)


def moon_altitude(when: WhenLike, latitude: float, longitude: float, time_zone: TzLike = None) -> float:
    """Apparent altitude of the Moon (degrees) relative to the rise/set horizon."""
    return _altitude("moon", when, latitude, longitude, time_zone)


def _altitude(body: str, when: WhenLike, latitude: float, longitude: float, time_zone: TzLike) -> float:
    observer = Observer.create(latitude, longitude, time_zone)
    return body_altitude_deg(_reg().get(body), observer, to_instant(when, observer.tz))
