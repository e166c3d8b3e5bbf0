# reference/lunar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.types import EclipticPosition, EquatorialPosition
from . import astro_args as aa
from .coordinates import ecliptic_to_equatorial


@dataclass(frozen=True)
class LunarArguments:
    """Mean lunar arguments (degrees, wrapped to [0,360))."""
    L0_deg: float  # mean longitude
    D_deg: float   # mean elongation from the Sun
    Mp_deg: float  # mean anomaly
    F_deg: float   # argument of latitude


# (constant, rate per Julian century), degrees
MOON_L0 = (218.3164477, 481267.88123421)
MOON_D = (297.8501921, 445267.1114034)
MOON_MP = (134.9633964, 477198.8675055)
MOON_F = (93.2720950, 483202.0175233)

# Three leading longitude terms of the ELP2000 series (degrees).
# Dropped terms (2M', annual equation, reduction to ecliptic) stay below 0.25 deg each.
EQUATION_OF_CENTER = 6.289      # sin(M')
EVECTION = 1.274                # sin(2D - M')
VARIATION = 0.658               # sin(2D)
LATITUDE_AMPLITUDE = 5.128      # sin(F), orbital inclination


def lunar_arguments(jd: float) -> LunarArguments:
    T = aa.T_centuries(jd)
    return LunarArguments(
        L0_deg=aa.wrap_deg(MOON_L0[0] + MOON_L0[1] * T),
        D_deg=aa.wrap_deg(MOON_D[0] + MOON_D[1] * T),
        Mp_deg=aa.wrap_deg(MOON_MP[0] + MOON_MP[1] * T),
        F_deg=aa.wrap_deg(MOON_F[0] + MOON_F[1] * T),
    )


def lunar_ecliptic(jd: float) -> EclipticPosition:
    """
    Geocentric ecliptic longitude/latitude of the Moon from a 3-term
    longitude series and a 1-term latitude series.
    """
    la = lunar_arguments(jd)
    D_rad = math.radians(la.D_deg)
    Mp_rad = math.radians(la.Mp_deg)
    F_rad = math.radians(la.F_deg)

    lon = (
        la.L0_deg
        + EQUATION_OF_CENTER * math.sin(Mp_rad)
        + EVECTION * math.sin(2.0 * D_rad - Mp_rad)
        + VARIATION * math.sin(2.0 * D_rad)
    )
    lat = LATITUDE_AMPLITUDE * math.sin(F_rad)

    return EclipticPosition(lon_deg=aa.wrap_deg(lon), lat_deg=lat)


def lunar_position(jd: float) -> EquatorialPosition:
    """Right ascension / declination of the Moon at a given JD."""
    return ecliptic_to_equatorial(lunar_ecliptic(jd), aa.mean_obliquity_deg(jd))
