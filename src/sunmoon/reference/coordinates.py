# reference/coordinates.py

from __future__ import annotations

import math

from ..core.types import EclipticPosition, EquatorialPosition
from . import astro_args as aa


def ecliptic_to_equatorial(ecl: EclipticPosition, eps_deg: float) -> EquatorialPosition:
    """
    Rotate geocentric ecliptic (lambda, beta) into equatorial (alpha, delta)
    about the vernal-equinox axis by the obliquity eps.

      tan(alpha) = (sin(lambda) cos(eps) - tan(beta) sin(eps)) / cos(lambda)
      sin(delta) = sin(beta) cos(eps) + cos(beta) sin(eps) sin(lambda)
    """
    lam = math.radians(ecl.lon_deg)
    beta = math.radians(ecl.lat_deg)
    eps = math.radians(eps_deg)

    # Use atan2(y, x) to preserve the correct quadrant
    y = math.sin(lam) * math.cos(eps) - math.tan(beta) * math.sin(eps)
    x = math.cos(lam)
    ra_deg = aa.wrap_deg(math.degrees(math.atan2(y, x)))

    sin_dec = math.sin(beta) * math.cos(eps) + math.cos(beta) * math.sin(eps) * math.sin(lam)
    dec_deg = math.degrees(math.asin(max(-1.0, min(1.0, sin_dec))))

    return EquatorialPosition(ra_deg=ra_deg, dec_deg=dec_deg)
