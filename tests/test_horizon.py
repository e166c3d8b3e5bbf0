# tests/test_horizon.py

import pytest
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

from sunmoon.core.time import local_midnight
from sunmoon.core.types import Observer
from sunmoon.engines.altitude import body_altitude_deg
from sunmoon.engines.horizon import (
    crossings_from_samples,
    find_crossings,
    find_rise_set,
    rise_set_from_samples,
    sample_day,
    sample_times,
)
from sunmoon.engines.specs import DEFAULT_SCAN, MOON, SUN, ScanSpec


EST = timezone(timedelta(hours=-5))
NYC = Observer(lat_deg=40.7128, lon_deg=-74.0060, tz=EST)
SVALBARD = Observer(lat_deg=78.0, lon_deg=15.6, tz=timezone.utc)
EQUINOX = date(2024, 3, 20)


def _synthetic(alts, step=timedelta(minutes=30)):
    t0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return [(t0 + k * step, a) for k, a in enumerate(alts)]


def test_crossings_from_synthetic_samples():
    step = timedelta(minutes=30)
    samples = _synthetic([-1.0, 1.0, 3.0, -3.0, -2.0], step)
    t0 = samples[0][0]

    cs = crossings_from_samples(samples, step, timezone.utc)
    assert [c.kind for c in cs] == ["rise", "set"]
    assert cs[0].time == t0 + timedelta(minutes=15)
    assert cs[1].time == t0 + timedelta(minutes=75)
    assert (cs[0].prev_alt_deg, cs[0].next_alt_deg) == (-1.0, 1.0)

def test_zero_altitude_boundaries():
    step = timedelta(minutes=30)
    # exactly 0 counts as above the horizon
    cs = crossings_from_samples(_synthetic([-2.0, 0.0, 0.0, -1.0], step), step, timezone.utc)
    assert [c.kind for c in cs] == ["rise", "set"]
    t0 = datetime(2024, 1, 1, tzinfo=timezone.utc)
    assert cs[0].time == t0 + step
    assert cs[1].time == t0 + 2 * step

def test_first_rise_and_first_set_only():
    step = timedelta(minutes=30)
    samples = _synthetic([1.0, -1.0, 1.0, -1.0, 1.0], step)
    rs = rise_set_from_samples(samples, step, timezone.utc)
    t0 = samples[0][0]
    assert rs.set == t0 + timedelta(minutes=15)
    assert rs.rise == t0 + timedelta(minutes=45)
    assert len(crossings_from_samples(samples, step, timezone.utc)) == 4

def test_no_crossing_flags():
    step = timedelta(minutes=30)
    up = rise_set_from_samples(_synthetic([0.0, 2.0, 5.0]), step, timezone.utc)
    assert (up.rise, up.set, up.always_up, up.always_down) == (None, None, True, False)

    down = rise_set_from_samples(_synthetic([-0.1, -2.0, -5.0]), step, timezone.utc)
    assert (down.rise, down.set, down.always_up, down.always_down) == (None, None, False, True)


def test_sample_times_start_at_local_midnight():
    ts = sample_times(NYC, EQUINOX)
    assert len(ts) == DEFAULT_SCAN.samples
    assert ts[0] == local_midnight(EQUINOX, EST)
    assert ts[-1] - ts[0] == timedelta(hours=23, minutes=30)

def test_sample_times_absolute_across_dst():
    """2024-03-10 is a 23-hour day in New York; steps stay 30 real minutes."""
    obs = Observer(lat_deg=40.7128, lon_deg=-74.0060, tz=ZoneInfo("America/New_York"))
    ts = sample_times(obs, date(2024, 3, 10))
    assert all(b - a == timedelta(minutes=30) for a, b in zip(ts, ts[1:]))
    assert ts[0] == datetime(2024, 3, 10, 5, 0, tzinfo=timezone.utc)

def test_custom_scan():
    scan = ScanSpec(samples=96, step=timedelta(minutes=15))
    rs = find_rise_set(SUN, NYC, EQUINOX, scan=scan)
    coarse = find_rise_set(SUN, NYC, EQUINOX)
    assert abs(rs.rise - coarse.rise) < timedelta(minutes=3)
    assert abs(rs.set - coarse.set) < timedelta(minutes=3)

    with pytest.raises(ValueError):
        ScanSpec(samples=1)
    with pytest.raises(ValueError):
        ScanSpec(step=timedelta(0))


def test_nyc_equinox_sun():
    rs = find_rise_set(SUN, NYC, EQUINOX)
    assert rs.rise is not None and rs.set is not None
    assert rs.rise < rs.set
    assert abs((rs.set - rs.rise) - timedelta(hours=12)) < timedelta(minutes=20)

    # roughly 6:00 AM and 6:10 PM local standard time
    assert rs.rise.utcoffset() == timedelta(hours=-5)
    assert rs.rise.hour in (5, 6)
    assert rs.set.hour == 18

def test_arctic_midnight_sun_and_polar_night():
    summer = find_rise_set(SUN, SVALBARD, date(2024, 6, 21))
    assert summer.rise is None and summer.set is None
    assert summer.always_up and not summer.always_down

    winter = find_rise_set(SUN, SVALBARD, date(2024, 12, 21))
    assert winter.rise is None and winter.set is None
    assert winter.always_down and not winter.always_up

def test_altitude_near_zero_at_events():
    rs = find_rise_set(SUN, NYC, EQUINOX)
    minutes = timedelta(minutes=20)

    # linear interpolation across the refraction band is coarse
    assert body_altitude_deg(SUN, NYC, rs.rise) == pytest.approx(0.0, abs=0.75)
    assert body_altitude_deg(SUN, NYC, rs.set) == pytest.approx(0.0, abs=0.75)

    assert body_altitude_deg(SUN, NYC, rs.rise + minutes) > body_altitude_deg(SUN, NYC, rs.rise - minutes)
    assert body_altitude_deg(SUN, NYC, rs.set + minutes) < body_altitude_deg(SUN, NYC, rs.set - minutes)

def test_moon_events_in_scan_window():
    day = date(2024, 4, 15)
    start = local_midnight(day, EST)
    end = start + timedelta(hours=23, minutes=30)

    rs = find_rise_set(MOON, NYC, day)
    assert rs.rise is not None or rs.set is not None
    for t in (rs.rise, rs.set):
        if t is not None:
            assert start <= t <= end
            assert body_altitude_deg(MOON, NYC, t) == pytest.approx(0.0, abs=0.75)

def test_idempotent():
    for body in (SUN, MOON):
        assert find_rise_set(body, NYC, EQUINOX) == find_rise_set(body, NYC, EQUINOX)

def test_find_crossings_superset():
    for body in (SUN, MOON):
        for offset in range(10):
            day = EQUINOX + timedelta(days=offset)
            rs = find_rise_set(body, NYC, day)
            times = [c.time for c in find_crossings(body, NYC, day)]
            for t in (rs.rise, rs.set):
                if t is not None:
                    assert t in times

def test_trace_receives_local_samples():
    seen = []
    samples = sample_day(SUN, NYC, EQUINOX, trace=lambda t, alt: seen.append((t, alt)))
    assert len(seen) == len(samples) == DEFAULT_SCAN.samples
    assert all(t.utcoffset() == timedelta(hours=-5) for t, _ in seen)
    assert [a for _, a in seen] == [a for _, a in samples]
