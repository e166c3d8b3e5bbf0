from __future__ import annotations

from math import fmod


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def frac01(x: float) -> float:
    """Return fractional part in [0,1)."""
    y = x - float(x // 1)
    # x // 1 can leave y == 1.0 for tiny negative x
    return 0.0 if y >= 1.0 else y

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
        # -1e-15 + 360.0 rounds to 360.0
        if y >= 360.0:
            y = 0.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return wrap_deg(deg + 180.0) - 180.0


# ------------------------------------------------------------
# Time variable
# ------------------------------------------------------------

J2000 = 2451545.0  # JD at J2000.0 (2000-01-01 12:00)
DAYS_PER_CENTURY = 36525.0


def T_centuries(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000) / DAYS_PER_CENTURY


def days_since_j2000(jd: float) -> float:
    return jd - J2000


# ------------------------------------------------------------
# Obliquity of the ecliptic
# ------------------------------------------------------------

# Low-precision linear model: 23.4393 deg at J2000.0, decreasing
# by 4e-7 deg per day (about 47" per century).
OBLIQUITY_J2000_DEG = 23.4393
OBLIQUITY_RATE_DEG_PER_DAY = 0.0000004


def mean_obliquity_deg(jd: float) -> float:
    """Mean obliquity of the ecliptic (degrees) at a given JD."""
    return OBLIQUITY_J2000_DEG - OBLIQUITY_RATE_DEG_PER_DAY * days_since_j2000(jd)
