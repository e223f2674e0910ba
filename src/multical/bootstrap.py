from __future__ import annotations
from multical.core.engine import EngineRegistry
from multical.engines.gregorian import GregorianEngine
from multical.engines.hijri import HijriEngine
from multical.engines.jalali import JalaliEngine

def build_registry() -> EngineRegistry:
    engines = {}
    for engine in (JalaliEngine(), HijriEngine(), GregorianEngine()):
        engines[engine.id.value] = engine
    return EngineRegistry(engines)
