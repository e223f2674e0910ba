from __future__ import annotations

from typing import Any, Dict, Tuple

from ..core.engine import check_date
from ..core.time import gregorian_day_of_year, gregorian_days_in_month, is_gregorian_leap
from ..core.types import CalendarId

MIN_YEAR = 1
MAX_YEAR = 9999


class GregorianEngine:
    """Identity engine so the Gregorian calendar shares the alternate calendars' code path."""
    id = CalendarId.GREGORIAN

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.value,
            "kind": "solar",
            "min_year": MIN_YEAR,
            "max_year": MAX_YEAR,
            "week_starts_at": "monday",
        }

    def from_gregorian(self, gy: int, gm: int, gd: int) -> Tuple[int, int, int]:
        return gy, gm, gd

    def to_gregorian(self, y: int, m: int, d: int) -> Tuple[int, int, int]:
        return y, m, d

    def is_leap_year(self, y: int) -> bool:
        return is_gregorian_leap(y)

    def days_in_month(self, m: int, y: int) -> int:
        return gregorian_days_in_month(m, y)

    def day_of_year(self, y: int, m: int, d: int) -> int:
        return gregorian_day_of_year(y, m, d)

    def days_in_year(self, y: int) -> int:
        return 366 if is_gregorian_leap(y) else 365

    def is_valid_date(self, y: int, m: int, d: int) -> bool:
        return MIN_YEAR <= y <= MAX_YEAR and 1 <= m <= 12 and 1 <= d <= gregorian_days_in_month(m, y)

    def validate(self, y: int, m: int, d: int) -> None:
        check_date(self, y, m, d)
