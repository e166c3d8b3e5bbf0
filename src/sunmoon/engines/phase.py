"""
sunmoon.engines.phase
---------------------
Lunar phase from the mean synodic cycle.

The phase is the fraction of the mean synodic month elapsed since a
reference new moon; illumination follows the cosine of that angle.
Named phases are a fixed table keyed by the whole-day age.
"""

from __future__ import annotations

import math
from typing import Tuple

from ..core.types import MoonPhase, PhaseName
from ..reference import astro_args as aa


# Mean new moon of 2000-01-06 (~14:24 UT), JD
REFERENCE_NEW_MOON_JD = 2451550.1
# Mean synodic month (days)
SYNODIC_MONTH_DAYS = 29.53058867
# Scale used to turn the phase fraction into a whole-day age
AGE_SCALE_DAYS = 29.53

# Day-of-cycle milestones for the "days to next" counts
FIRST_QUARTER_DAY = 7
FULL_MOON_DAY = 15
LAST_QUARTER_DAY = 22
CYCLE_DAYS = 30

# (first_age, last_age, name, is_waxing, next_phase, next_phase_day)
PHASE_TABLE: Tuple[Tuple[int, int, PhaseName, bool, PhaseName, int], ...] = (
    (0, 1, PhaseName.NEW_MOON, True, PhaseName.FIRST_QUARTER, FIRST_QUARTER_DAY),
    (2, 6, PhaseName.WAXING_CRESCENT, True, PhaseName.FIRST_QUARTER, FIRST_QUARTER_DAY),
    (7, 8, PhaseName.FIRST_QUARTER, True, PhaseName.FULL_MOON, FULL_MOON_DAY),
    (9, 13, PhaseName.WAXING_GIBBOUS, True, PhaseName.FULL_MOON, FULL_MOON_DAY),
    (14, 16, PhaseName.FULL_MOON, False, PhaseName.LAST_QUARTER, LAST_QUARTER_DAY),
    (17, 21, PhaseName.WANING_GIBBOUS, False, PhaseName.LAST_QUARTER, LAST_QUARTER_DAY),
    (22, 23, PhaseName.LAST_QUARTER, False, PhaseName.NEW_MOON, CYCLE_DAYS),
    (24, 29, PhaseName.WANING_CRESCENT, False, PhaseName.NEW_MOON, CYCLE_DAYS),
)


def phase_fraction(jd: float) -> float:
    """Position in the synodic cycle, [0,1); 0 = new, 0.5 = full."""
    return aa.frac01((jd - REFERENCE_NEW_MOON_JD) / SYNODIC_MONTH_DAYS)

def illumination(phase: float) -> float:
    """Illuminated fraction of the disk, [0,1]."""
    return 0.5 * (1.0 - math.cos(2.0 * math.pi * phase))

def age_days(phase: float) -> int:
    return int(math.floor(phase * AGE_SCALE_DAYS))


def phase_info(age: int) -> Tuple[PhaseName, bool, PhaseName, int]:
    """(name, is_waxing, next_phase_name, days_to_next_phase) for a whole-day age."""
    for first, last, name, waxing, next_name, next_day in PHASE_TABLE:
        if first <= age <= last:
            return name, waxing, next_name, next_day - age
    raise ValueError(f"moon age must be in [0, 29], got {age}")


def days_to_next_full_moon(age: int) -> int:
    if age < FULL_MOON_DAY:
        return FULL_MOON_DAY - age
    return (CYCLE_DAYS - age) + FULL_MOON_DAY


def current_phase(jd: float) -> MoonPhase:
    phase = phase_fraction(jd)
    age = age_days(phase)
    name, waxing, next_name, days_to_next = phase_info(age)
    return MoonPhase(
        name=name,
        illumination=illumination(phase),
        age_days=age,
        is_waxing=waxing,
        next_phase_name=next_name,
        days_to_next_phase=days_to_next,
        days_to_next_full_moon=days_to_next_full_moon(age),
    )
