"""
sunmoon.engines.altitude
------------------------
Apparent altitude of a body above the observer's horizon.

The result is the geometric altitude plus a near-horizon refraction term
plus a fixed offset, so that 0 deg is the altitude at which the body is
reported as rising or setting.
"""

from __future__ import annotations

import math
from datetime import datetime

from ..core.engine import BodySpec
from ..core.time import to_julian_day
from ..core.types import EquatorialPosition, Observer
from ..reference import astro_args as aa
from ..reference.sidereal import local_sidereal_time_deg
from .specs import ALTITUDE_OFFSET_DEG


# Refraction is applied only inside this geometric-altitude band (degrees).
REFRACTION_MIN_ALT_DEG = -1.0
REFRACTION_MAX_ALT_DEG = 15.0

# Saemundsson-style formula: R' = 1.02 / tan(h + 10.3/(h + 5.11)) arcminutes
REFRACTION_SCALE_ARCMIN = 1.02
REFRACTION_A = 10.3
REFRACTION_B = 5.11


def refraction_deg(alt_deg: float) -> float:
    """Atmospheric refraction (degrees) to add to a geometric altitude."""
    if not (REFRACTION_MIN_ALT_DEG < alt_deg < REFRACTION_MAX_ALT_DEG):
        return 0.0
    arg = math.radians(alt_deg + REFRACTION_A / (alt_deg + REFRACTION_B))
    return REFRACTION_SCALE_ARCMIN / math.tan(arg) / 60.0


def hour_angle_deg(position: EquatorialPosition, lon_deg: float, jd: float) -> float:
    """Local hour angle (degrees, [-180,180)); positive west of the meridian."""
    return aa.wrap180(local_sidereal_time_deg(jd, lon_deg) - position.ra_deg)


def geometric_altitude_deg(position: EquatorialPosition, observer: Observer, jd: float) -> float:
    ha = math.radians(hour_angle_deg(position, observer.lon_deg, jd))
    lat = math.radians(observer.lat_deg)
    dec = math.radians(position.dec_deg)

    sin_alt = math.sin(lat) * math.sin(dec) + math.cos(lat) * math.cos(dec) * math.cos(ha)
    # rounding can push |sin_alt| just past 1 at the zenith/nadir
    sin_alt = max(-1.0, min(1.0, sin_alt))
    return math.degrees(math.asin(sin_alt))


def apparent_altitude_deg(
    position: EquatorialPosition,
    observer: Observer,
    jd: float,
    *,
    offset_deg: float = ALTITUDE_OFFSET_DEG,
) -> float:
    """
    Altitude (degrees) relative to the rise/set horizon; negative below it.
    """
    alt = geometric_altitude_deg(position, observer, jd)
    return alt + refraction_deg(alt) + offset_deg


def body_altitude_deg(body: BodySpec, observer: Observer, instant: datetime) -> float:
    jd = to_julian_day(instant)
    return apparent_altitude_deg(body.position(jd), observer, jd, offset_deg=body.altitude_offset_deg)
