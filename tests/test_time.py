# tests/test_time.py

import pytest
import random
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from sunmoon.core import time as ts
from sunmoon.core.errors import UnknownTimeZoneError


def test_jd_datetime_roundtrip():
    """
    Round-trip continuous Julian Days through timezone-aware datetimes,
    across several centuries on both sides of the Unix epoch.
    """
    random.seed(42)
    for _ in range(1000):
        # 1700-01-01 .. 2300-01-01
        jd_in = random.uniform(2341972.5, 2561117.5)
        dt = ts.from_julian_day(jd_in)
        jd_out = ts.to_julian_day(dt)
        # 1e-8 days is roughly a millisecond
        assert jd_in == pytest.approx(jd_out, abs=1e-8)

def test_datetime_jd_roundtrip():
    dt_in = datetime(1843, 7, 14, 3, 25, 17, 250000, tzinfo=timezone.utc)
    dt_out = ts.from_julian_day(ts.to_julian_day(dt_in))
    assert abs(dt_out - dt_in) < timedelta(milliseconds=1)

def test_known_epochs():
    # Unix epoch is 1970-01-01 00:00:00 UTC
    assert ts.to_julian_day(datetime(1970, 1, 1, tzinfo=timezone.utc)) == 2440587.5

    # J2000.0 is 2000-01-01 12:00 (treated as UTC here)
    assert ts.to_julian_day(datetime(2000, 1, 1, 12, tzinfo=timezone.utc)) == pytest.approx(2451545.0, abs=1e-9)

    assert ts.from_julian_day(2440587.5) == datetime(1970, 1, 1, tzinfo=timezone.utc)

def test_jd_is_offset_independent():
    """The same instant expressed in different zones maps to the same JD."""
    utc = datetime(2024, 3, 20, 12, 0, tzinfo=timezone.utc)
    est = utc.astimezone(timezone(timedelta(hours=-5)))
    assert ts.to_julian_day(utc) == ts.to_julian_day(est)

def test_jd_monotonic():
    t0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
    jds = [ts.to_julian_day(t0 + timedelta(minutes=17 * k)) for k in range(200)]
    assert all(b > a for a, b in zip(jds, jds[1:]))

def test_naive_datetime_rejected():
    with pytest.raises(ValueError):
        ts.to_julian_day(datetime(2024, 1, 1))


def test_resolve_tz():
    assert ts.resolve_tz(None) is timezone.utc
    fixed = timezone(timedelta(hours=-5))
    assert ts.resolve_tz(fixed) is fixed
    assert ts.resolve_tz("America/New_York") == ZoneInfo("America/New_York")

    with pytest.raises(UnknownTimeZoneError):
        ts.resolve_tz("Not/AZone")

def test_to_instant():
    tz = ZoneInfo("Europe/Berlin")

    aware = datetime(2024, 6, 1, 8, 0, tzinfo=timezone.utc)
    assert ts.to_instant(aware, tz) is aware

    naive = ts.to_instant(datetime(2024, 6, 1, 8, 0), tz)
    assert naive.tzinfo is tz
    assert naive.astimezone(timezone.utc).hour == 6  # CEST = UTC+2

    noon = ts.to_instant(date(2024, 6, 1), tz)
    assert (noon.hour, noon.minute) == (12, 0)
    assert noon.tzinfo is tz

def test_local_day_and_midnight():
    tz = timezone(timedelta(hours=-5))
    late = datetime(2024, 3, 21, 3, 0, tzinfo=timezone.utc)  # 22:00 on the 20th locally
    assert ts.local_day(late, tz) == date(2024, 3, 20)

    m = ts.local_midnight(date(2024, 3, 20), tz)
    assert m.astimezone(timezone.utc) == datetime(2024, 3, 20, 5, 0, tzinfo=timezone.utc)

def test_now_utc():
    pinned = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert ts.now_utc(pinned) is pinned
    assert ts.now_utc().tzinfo is not None
    with pytest.raises(ValueError):
        ts.now_utc(datetime(2024, 1, 1))
