# reference/sidereal.py

from __future__ import annotations

from . import astro_args as aa

# IAU 1982 GMST polynomial (Meeus eq. 12.4), degrees
GMST_J2000_DEG = 280.46061837        # GMST at J2000.0
GMST_RATE_DEG_PER_DAY = 360.98564736629
GMST_T2_DEG = 0.000387933
GMST_T3_DIVISOR = 38710000.0


def gmst_deg(jd: float) -> float:
    """
    Greenwich Mean Sidereal Time (degrees, [0,360)) at a given JD.
    """
    T = aa.T_centuries(jd)
    gmst = (
        GMST_J2000_DEG
        + GMST_RATE_DEG_PER_DAY * aa.days_since_j2000(jd)
        + GMST_T2_DEG * T * T
        - (T * T * T) / GMST_T3_DIVISOR
    )
    return aa.wrap_deg(gmst)


def local_sidereal_time_deg(jd: float, lon_deg: float) -> float:
    """
    Local Mean Sidereal Time (degrees, [0,360)); lon_deg positive East.
    """
    return aa.wrap_deg(gmst_deg(jd) + lon_deg)
