# reference/solar.py

from __future__ import annotations

import math

from ..core.types import EclipticPosition, EquatorialPosition
from . import astro_args as aa
from .coordinates import ecliptic_to_equatorial


# Geometric mean longitude and mean anomaly of the Sun (Meeus ch. 25), degrees
SUN_L0 = (280.46646, 36000.76983, 0.0003032)
SUN_M = (357.52911, 35999.05029, -0.0001537)


def solar_ecliptic(jd: float) -> EclipticPosition:
    """
    True geometric ecliptic longitude of the Sun (latitude taken as 0),
    from the 3-term equation of center. Accurate to ~0.01 deg.
    """
    T = aa.T_centuries(jd)

    L0_deg = aa.wrap_deg(SUN_L0[0] + SUN_L0[1] * T + SUN_L0[2] * T * T)
    M_deg = aa.wrap_deg(SUN_M[0] + SUN_M[1] * T + SUN_M[2] * T * T)
    M_rad = math.radians(M_deg)

    # Equation of Center (C_sun)
    C_sun = (
        (1.914602 - 0.004817 * T - 0.000014 * T * T) * math.sin(M_rad)
        + (0.019993 - 0.000101 * T) * math.sin(2.0 * M_rad)
        + 0.000289 * math.sin(3.0 * M_rad)
    )

    return EclipticPosition(lon_deg=aa.wrap_deg(L0_deg + C_sun), lat_deg=0.0)


def solar_position(jd: float) -> EquatorialPosition:
    """Right ascension / declination of the Sun at a given JD."""
    return ecliptic_to_equatorial(solar_ecliptic(jd), aa.mean_obliquity_deg(jd))
