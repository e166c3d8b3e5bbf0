from __future__ import annotations
from sunmoon.core.engine import BodyRegistry
from sunmoon.engines.specs import ALL_BODIES

def build_registry() -> BodyRegistry:
    return BodyRegistry(dict(ALL_BODIES))
