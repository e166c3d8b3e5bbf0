"""
sunmoon.engines.horizon
-----------------------
Rise/set detection by fixed-step sampling and linear interpolation.

One local day is sampled from local midnight (48 samples, 30 minutes apart
by default). A rise is a sample pair with prev < 0 <= curr, a set is a pair
with prev >= 0 > curr. The crossing instant is interpolated linearly between
the two samples.

`find_rise_set` keeps only the first rise and the first set of the day;
`find_crossings` returns every crossing (e.g. a second moonset at high
latitudes).
"""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Callable, List, Optional, Sequence, Tuple

from ..core.engine import BodySpec
from ..core.time import local_midnight
from ..core.types import Crossing, Observer, RiseSet
from .altitude import body_altitude_deg
from .specs import DEFAULT_SCAN, ScanSpec

logger = logging.getLogger(__name__)

# Receives every (instant, altitude_deg) sample as it is computed.
TraceSink = Callable[[datetime, float], None]
Sample = Tuple[datetime, float]


def sample_times(observer: Observer, day: date, scan: ScanSpec = DEFAULT_SCAN) -> List[datetime]:
    """
    UTC instants of the scan. Steps are absolute, so a DST change inside the
    day does not shift the later samples.
    """
    start = local_midnight(day, observer.tz).astimezone(timezone.utc)
    return [start + k * scan.step for k in range(scan.samples)]


def sample_day(
    body: BodySpec,
    observer: Observer,
    day: date,
    *,
    scan: ScanSpec = DEFAULT_SCAN,
    trace: Optional[TraceSink] = None,
) -> List[Sample]:
    samples: List[Sample] = []
    for t in sample_times(observer, day, scan):
        alt = body_altitude_deg(body, observer, t)
        if trace is not None:
            trace(t.astimezone(observer.tz), alt)
        samples.append((t, alt))
    return samples


def _interpolate(prev_alt: float, curr_alt: float, curr_time: datetime, step: timedelta) -> datetime:
    # prev and curr straddle zero, so the denominator is never 0
    ratio = -prev_alt / (curr_alt - prev_alt)
    return curr_time - step + ratio * step


def crossings_from_samples(samples: Sequence[Sample], step: timedelta, tz: tzinfo) -> List[Crossing]:
    """Every horizon crossing between consecutive samples, in time order."""
    out: List[Crossing] = []
    for (_, prev_alt), (curr_time, curr_alt) in zip(samples, samples[1:]):
        if prev_alt < 0 <= curr_alt:
            kind = "rise"
        elif prev_alt >= 0 > curr_alt:
            kind = "set"
        else:
            continue
        t = _interpolate(prev_alt, curr_alt, curr_time, step).astimezone(tz)
        out.append(Crossing(kind=kind, time=t, prev_alt_deg=prev_alt, next_alt_deg=curr_alt))
    return out


def find_crossings(
    body: BodySpec,
    observer: Observer,
    day: date,
    *,
    scan: ScanSpec = DEFAULT_SCAN,
    trace: Optional[TraceSink] = None,
) -> List[Crossing]:
    samples = sample_day(body, observer, day, scan=scan, trace=trace)
    crossings = crossings_from_samples(samples, scan.step, observer.tz)
    for c in crossings:
        logger.debug("%s %s at %s (%.3f -> %.3f deg)", body.name, c.kind, c.time.isoformat(), c.prev_alt_deg, c.next_alt_deg)
    return crossings


def rise_set_from_samples(samples: Sequence[Sample], step: timedelta, tz: tzinfo) -> RiseSet:
    crossings = crossings_from_samples(samples, step, tz)
    rise = next((c.time for c in crossings if c.kind == "rise"), None)
    set_ = next((c.time for c in crossings if c.kind == "set"), None)

    if crossings:
        return RiseSet(rise=rise, set=set_)

    # No crossing: the body stayed on one side of the horizon all day
    return RiseSet(
        rise=None,
        set=None,
        always_up=all(alt >= 0 for _, alt in samples),
        always_down=all(alt < 0 for _, alt in samples),
    )


def find_rise_set(
    body: BodySpec,
    observer: Observer,
    day: date,
    *,
    scan: ScanSpec = DEFAULT_SCAN,
    trace: Optional[TraceSink] = None,
) -> RiseSet:
    """
    First rise and first set of `body` on the local civil `day`.
    Absent events are None (circumpolar or never-rising that day).
    """
    samples = sample_day(body, observer, day, scan=scan, trace=trace)
    rs = rise_set_from_samples(samples, scan.step, observer.tz)
    logger.debug("%s on %s: rise=%s set=%s", body.name, day.isoformat(), rs.rise, rs.set)
    return rs
