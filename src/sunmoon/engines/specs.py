"""
sunmoon.engines.specs
---------------------
Pure data: the bodies the library knows about and the default day scan.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import Dict

from ..core.engine import BodySpec
from ..reference.lunar import lunar_position
from ..reference.solar import solar_position


# Altitude of the event horizon (degrees). Stands in for the apparent
# semidiameter plus the Moon's horizontal parallax as a single constant;
# applied to both bodies.
ALTITUDE_OFFSET_DEG = -0.583


@dataclass(frozen=True)
class ScanSpec:
    """Fixed-step sampling of one local day."""
    samples: int = 48
    step: timedelta = timedelta(minutes=30)

    def __post_init__(self) -> None:
        if self.samples < 2:
            raise ValueError("a scan needs at least two samples")
        if self.step <= timedelta(0):
            raise ValueError("scan step must be positive")


DEFAULT_SCAN = ScanSpec()

SUN = BodySpec(name="sun", position=solar_position, altitude_offset_deg=ALTITUDE_OFFSET_DEG)
MOON = BodySpec(name="moon", position=lunar_position, altitude_offset_deg=ALTITUDE_OFFSET_DEG)

ALL_BODIES: Dict[str, BodySpec] = {
    SUN.name: SUN,
    MOON.name: MOON,
}
