"""
multical.engines.hijri
----------------------
Tabular Islamic (Hijri Qamari) <-> Gregorian conversion.

The Gregorian side goes through the Julian Day Number; the Hijri side
accumulates whole 30-year cycles (10631 days), years of the cycle, and
months of the year.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from ..core.engine import check_date
from ..core.errors import ValidationError
from ..core.time import jdn_from_ymd, ymd_from_jdn
from ..core.types import CalendarId

HIJRI_MONTH_DAYS = (30, 29, 30, 29, 30, 29, 30, 29, 30, 29, 30, 29)
LEAP_YEARS_IN_CYCLE = frozenset((2, 5, 7, 10, 13, 16, 18, 21, 24, 26, 29))

EPOCH_JDN = 1948440  # 1 Muharram 1 AH
CYCLE_YEARS = 30
CYCLE_DAYS = 10631   # 354*30 + 11


def _year_length(year_in_cycle: int) -> int:
    return 355 if year_in_cycle in LEAP_YEARS_IN_CYCLE else 354


def to_hijri(gy: int, gm: int, gd: int) -> Tuple[int, int, int]:
    """Gregorian (y, m, d) -> Hijri (y, m, d)."""
    days = jdn_from_ymd(gy, gm, gd) - EPOCH_JDN
    if days < 0:
        raise ValidationError(f"Gregorian date {gy}-{gm:02d}-{gd:02d} precedes the Hijri epoch")

    cycles, remaining = divmod(days, CYCLE_DAYS)
    year = cycles * CYCLE_YEARS
    for y in range(1, CYCLE_YEARS + 1):
        length = _year_length(y)
        if remaining < length:
            year += y
            break
        remaining -= length

    month = 12
    for m in range(1, 13):
        dim = days_in_month(m, year)
        if remaining < dim:
            month = m
            break
        remaining -= dim
    return year, month, remaining + 1


def to_gregorian(hy: int, hm: int, hd: int) -> Tuple[int, int, int]:
    """Hijri (y, m, d) -> Gregorian (y, m, d)."""
    if hy < 1:
        raise ValidationError(f"Hijri year {hy} precedes the epoch")
    cycles, year_in_cycle = divmod(hy - 1, CYCLE_YEARS)
    days = cycles * CYCLE_DAYS
    days += sum(_year_length(y) for y in range(1, year_in_cycle + 1))
    days += sum(days_in_month(m, hy) for m in range(1, hm))
    days += hd - 1
    return ymd_from_jdn(days + EPOCH_JDN)


def is_leap_year(hy: int) -> bool:
    return ((hy - 1) % CYCLE_YEARS) + 1 in LEAP_YEARS_IN_CYCLE


def days_in_month(hm: int, hy: int) -> int:
    if hm == 12 and is_leap_year(hy):
        return 30
    return HIJRI_MONTH_DAYS[hm - 1]


def day_of_year(hm: int, hd: int) -> int:
    return sum(HIJRI_MONTH_DAYS[:hm - 1]) + hd


def days_in_year(hy: int) -> int:
    return 355 if is_leap_year(hy) else 354


def is_valid_date(hy: int, hm: int, hd: int) -> bool:
    return hy >= 1 and 1 <= hm <= 12 and 1 <= hd <= days_in_month(hm, hy)


class HijriEngine:
    id = CalendarId.HIJRI

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.value,
            "kind": "lunar",
            "leap_cycle_years": CYCLE_YEARS,
            "leap_positions": sorted(LEAP_YEARS_IN_CYCLE),
            "min_year": 1,
            "week_starts_at": "saturday",
        }

    def from_gregorian(self, gy: int, gm: int, gd: int) -> Tuple[int, int, int]:
        return to_hijri(gy, gm, gd)

    def to_gregorian(self, y: int, m: int, d: int) -> Tuple[int, int, int]:
        return to_gregorian(y, m, d)

    def is_leap_year(self, y: int) -> bool:
        return is_leap_year(y)

    def days_in_month(self, m: int, y: int) -> int:
        return days_in_month(m, y)

    def day_of_year(self, y: int, m: int, d: int) -> int:
        return day_of_year(m, d)

    def days_in_year(self, y: int) -> int:
        return days_in_year(y)

    def is_valid_date(self, y: int, m: int, d: int) -> bool:
        return is_valid_date(y, m, d)

    def validate(self, y: int, m: int, d: int) -> None:
        check_date(self, y, m, d)
