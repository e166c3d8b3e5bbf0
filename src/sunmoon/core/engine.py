from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Protocol

from .types import EquatorialPosition

class PositionModel(Protocol):
    """Maps a Julian Day to the geocentric equatorial position of one body."""
    def __call__(self, jd: float) -> EquatorialPosition: ...

@dataclass(frozen=True)
class BodySpec:
    """Everything the altitude evaluator and crossing solver need about a body."""
    name: str
    position: PositionModel
    # Fixed altitude of the "event" horizon: semidiameter (+ parallax for the Moon)
    altitude_offset_deg: float

@dataclass
class BodyRegistry:
    _bodies: Dict[str, BodySpec]

    def get(self, name: str) -> BodySpec:
        if name not in self._bodies:
            raise KeyError(f"Unknown body '{name}'. Available: {sorted(self._bodies)}")
        return self._bodies[name]

    def list(self) -> List[str]:
        return sorted(self._bodies.keys())

    def register(self, spec: BodySpec, *, overwrite: bool = False) -> None:
        if (not overwrite) and (spec.name in self._bodies):
            raise KeyError(f"Body '{spec.name}' already exists. Use overwrite=True to replace.")
        self._bodies[spec.name] = spec
