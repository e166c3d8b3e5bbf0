from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from enum import Enum
from typing import Literal, Optional

from .errors import InvalidCoordinatesError
from .time import TzLike, resolve_tz


@dataclass(frozen=True)
class EclipticPosition:
    """Geocentric ecliptic coordinates (degrees)."""
    lon_deg: float  # [0, 360)
    lat_deg: float

@dataclass(frozen=True)
class EquatorialPosition:
    """Geocentric equatorial coordinates (degrees)."""
    ra_deg: float   # [0, 360)
    dec_deg: float  # [-90, 90]

    @property
    def ra_hours(self) -> float:
        return self.ra_deg / 15.0


@dataclass(frozen=True)
class Observer:
    lat_deg: float   # [-90, 90], positive North
    lon_deg: float   # [-180, 180], positive East
    tz: tzinfo = timezone.utc

    def __post_init__(self) -> None:
        if not (math.isfinite(self.lat_deg) and -90.0 <= self.lat_deg <= 90.0):
            raise InvalidCoordinatesError(f"latitude must be in [-90, 90], got {self.lat_deg!r}")
        if not (math.isfinite(self.lon_deg) and -180.0 <= self.lon_deg <= 180.0):
            raise InvalidCoordinatesError(f"longitude must be in [-180, 180], got {self.lon_deg!r}")

    @classmethod
    def create(cls, latitude: float, longitude: float, time_zone: TzLike = None) -> "Observer":
        """Build an observer from decimal degrees and a tzinfo / IANA name / None (UTC)."""
        return cls(lat_deg=float(latitude), lon_deg=float(longitude), tz=resolve_tz(time_zone))


CrossingKind = Literal["rise", "set"]

@dataclass(frozen=True)
class Crossing:
    """A single horizon crossing bracketed by two altitude samples."""
    kind: CrossingKind
    time: datetime
    prev_alt_deg: float
    next_alt_deg: float

@dataclass(frozen=True)
class RiseSet:
    """
    First rise and first set found in one local day.

    always_up / always_down are only set when no crossing was found at all
    and every sample sat on the same side of the horizon.
    """
    rise: Optional[datetime]
    set: Optional[datetime]
    always_up: bool = False
    always_down: bool = False


@dataclass(frozen=True)
class SunTimes:
    sunrise: Optional[datetime]
    sunset: Optional[datetime]
    is_currently_daylight: bool
    day_length: Optional[timedelta]

@dataclass(frozen=True)
class MoonTimes:
    moonrise: Optional[datetime]
    moonset: Optional[datetime]


class PhaseName(str, Enum):
    """The eight conventional lunar phases."""
    NEW_MOON = "New Moon"
    WAXING_CRESCENT = "Waxing Crescent"
    FIRST_QUARTER = "First Quarter"
    WAXING_GIBBOUS = "Waxing Gibbous"
    FULL_MOON = "Full Moon"
    WANING_GIBBOUS = "Waning Gibbous"
    LAST_QUARTER = "Last Quarter"
    WANING_CRESCENT = "Waning Crescent"

    def __str__(self) -> str:
        return self.value

@dataclass(frozen=True)
class MoonPhase:
    name: PhaseName
    illumination: float          # [0, 1]
    age_days: int                # [0, 29]
    is_waxing: bool
    next_phase_name: PhaseName
    days_to_next_phase: int
    days_to_next_full_moon: int

    @property
    def illumination_percent(self) -> int:
        return int(self.illumination * 100)


SunEventKind = Literal["sunrise", "sunset"]

@dataclass(frozen=True)
class SunEvent:
    event: SunEventKind
    time: datetime
    is_currently_daylight: bool
