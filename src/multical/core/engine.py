from __future__ import annotations
from dataclasses import dataclass
import logging
from typing import Any, Dict, List, Protocol, Tuple

from .errors import ValidationError
from .types import CalendarId

logger = logging.getLogger(__name__)

YMD = Tuple[int, int, int]


class CalendarEngine(Protocol):
    id: CalendarId

    def info(self) -> Dict[str, Any]: ...
    def from_gregorian(self, gy: int, gm: int, gd: int) -> YMD: ...
    def to_gregorian(self, y: int, m: int, d: int) -> YMD: ...
    def is_leap_year(self, y: int) -> bool: ...
    def days_in_month(self, m: int, y: int) -> int: ...
    def day_of_year(self, y: int, m: int, d: int) -> int: ...
    def days_in_year(self, y: int) -> int: ...
    def is_valid_date(self, y: int, m: int, d: int) -> bool: ...
    def validate(self, y: int, m: int, d: int) -> None: ...


def check_date(engine: CalendarEngine, y: int, m: int, d: int) -> None:
    """Raise ValidationError naming the offending component."""
    cal = engine.id.value
    if not (1 <= m <= 12):
        raise ValidationError(f"Invalid {cal} month {m} (expected 1..12)")
    if not engine.is_valid_date(y, m, 1):
        raise ValidationError(f"{cal} year {y} is outside the supported range")
    dim = engine.days_in_month(m, y)
    if not (1 <= d <= dim):
        raise ValidationError(f"Invalid {cal} day {d} for {y}/{m:02d} (expected 1..{dim})")


@dataclass
class EngineRegistry:
    _engines: Dict[str, CalendarEngine]

    def get(self, name: str) -> CalendarEngine:
        key = name.value if isinstance(name, CalendarId) else name
        if key not in self._engines:
            raise KeyError(f"Unknown calendar '{key}'. Available: {sorted(self._engines)}")
        return self._engines[key]

    def list(self) -> List[str]:
        return sorted(self._engines.keys())

    def register(self, name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
        if (not overwrite) and (name in self._engines):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        if name in self._engines:
            logger.info("Replacing calendar engine '%s'", name)
        self._engines[name] = engine
