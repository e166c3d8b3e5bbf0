"""sunmoon public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    calculate_sun_times,
    get_next_sun_event,
    get_current_moon_phase,
    calculate_moon_times,
    day_length_change,
    sun_altitude,
    moon_altitude,
    list_bodies,
    get_body,
    register_body,
    clear_cache,
)
from .core.errors import SunmoonError, InvalidCoordinatesError, UnknownTimeZoneError
from .core.types import (
    EquatorialPosition,
    Observer,
    SunTimes,
    MoonTimes,
    MoonPhase,
    PhaseName,
    SunEvent,
)

__all__ = [
    "calculate_sun_times",
    "get_next_sun_event",
    "get_current_moon_phase",
    "calculate_moon_times",
    "day_length_change",
    "sun_altitude",
    "moon_altitude",
    "list_bodies",
    "get_body",
    "register_body",
    "clear_cache",
    "SunmoonError",
    "InvalidCoordinatesError",
    "UnknownTimeZoneError",
    "EquatorialPosition",
    "Observer",
    "SunTimes",
    "MoonTimes",
    "MoonPhase",
    "PhaseName",
    "SunEvent",
]
