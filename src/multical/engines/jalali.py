"""
multical.engines.jalali
-----------------------
Solar Hijri (Jalali) <-> Gregorian conversion.

Both directions reduce the input to a day number counted from a shared
epoch (Gregorian 1600-03-20 = Jalali 979/01/01) and expand it back into the
other calendar by successive division against cycle lengths:

  Gregorian: 146097 (400 y), 36524 / 36525 (100 y), 1461 (4 y), 365
  Jalali:    12053 (33 y = 8 leap), 1461 (4 y), 365

Algorithm by Roozbeh Pournader and Mohammad Toosi. Integer arithmetic only.
"""

from __future__ import annotations

from typing import Any, Dict, Tuple

from ..core.engine import check_date
from ..core.errors import ValidationError
from ..core.types import CalendarId

JALALI_MONTH_DAYS = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)
GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)

EPOCH_YEAR = 979           # Jalali year of day number 0
GREGORIAN_BASE_YEAR = 1600
EPOCH_OFFSET = 79          # Gregorian day number (from 1600-01-01) of Jalali day 0

CYCLE_33_DAYS = 12053      # 365*33 + 8
BLOCK_4_DAYS = 1461        # 365*4 + 1
GREG_400_DAYS = 146097     # 365*400 + 97
GREG_100_DAYS = 36524      # 365*100 + 24
GREG_100_LEAD_DAYS = 36525 # first century of a 400-year cycle keeps its leap year


def _gregorian_day_number(gy: int, gm: int, gd: int) -> int:
    gy2 = gy - GREGORIAN_BASE_YEAR
    n = 365 * gy2 + (gy2 + 3) // 4 - (gy2 + 99) // 100 + (gy2 + 399) // 400
    n += sum(GREGORIAN_MONTH_DAYS[:gm - 1])
    if gm > 2 and ((gy % 4 == 0 and gy % 100 != 0) or gy % 400 == 0):
        n += 1
    return n + gd - 1


def _jalali_day_number(jy: int, jm: int, jd: int) -> int:
    jy2 = jy - EPOCH_YEAR
    n = 365 * jy2 + (jy2 // 33) * 8 + (jy2 % 33 + 3) // 4
    n += sum(JALALI_MONTH_DAYS[:jm - 1])
    return n + jd - 1


def to_jalali(gy: int, gm: int, gd: int) -> Tuple[int, int, int]:
    """Gregorian (y, m, d) -> Jalali (y, m, d)."""
    j_day_no = _gregorian_day_number(gy, gm, gd) - EPOCH_OFFSET
    if j_day_no < 0:
        raise ValidationError(f"Gregorian date {gy}-{gm:02d}-{gd:02d} precedes the Jalali epoch")

    cycles, j_day_no = divmod(j_day_no, CYCLE_33_DAYS)
    jy = EPOCH_YEAR + 33 * cycles + 4 * (j_day_no // BLOCK_4_DAYS)
    j_day_no %= BLOCK_4_DAYS

    # first year of each 4-year block is the leap one
    if j_day_no >= 366:
        jy += (j_day_no - 1) // 365
        j_day_no = (j_day_no - 1) % 365

    i = 0
    while i < 11 and j_day_no >= JALALI_MONTH_DAYS[i]:
        j_day_no -= JALALI_MONTH_DAYS[i]
        i += 1
    return jy, i + 1, j_day_no + 1


def to_gregorian(jy: int, jm: int, jd: int) -> Tuple[int, int, int]:
    """Jalali (y, m, d) -> Gregorian (y, m, d)."""
    if jy < EPOCH_YEAR:
        raise ValidationError(f"Jalali year {jy} precedes the supported epoch {EPOCH_YEAR}")
    g_day_no = _jalali_day_number(jy, jm, jd) + EPOCH_OFFSET

    gy = GREGORIAN_BASE_YEAR + 400 * (g_day_no // GREG_400_DAYS)
    g_day_no %= GREG_400_DAYS

    leap = True
    if g_day_no >= GREG_100_LEAD_DAYS:
        g_day_no -= 1
        gy += 100 * (g_day_no // GREG_100_DAYS)
        g_day_no %= GREG_100_DAYS
        if g_day_no >= 365:
            g_day_no += 1
        else:
            leap = False

    gy += 4 * (g_day_no // BLOCK_4_DAYS)
    g_day_no %= BLOCK_4_DAYS

    if g_day_no >= 366:
        leap = False
        g_day_no -= 1
        gy += g_day_no // 365
        g_day_no %= 365

    i = 0
    while True:
        dim = GREGORIAN_MONTH_DAYS[i] + (1 if i == 1 and leap else 0)
        if g_day_no < dim:
            break
        g_day_no -= dim
        i += 1
    return gy, i + 1, g_day_no + 1


def is_leap_year(jy: int) -> bool:
    """33-year arithmetic rule; agrees with the day-number algorithm above."""
    return (25 * jy + 11) % 33 < 8


def days_in_month(jm: int, jy: int) -> int:
    if jm <= 6:
        return 31
    if jm <= 11:
        return 30
    return 30 if is_leap_year(jy) else 29


def day_of_year(jm: int, jd: int) -> int:
    if jm <= 6:
        return (jm - 1) * 31 + jd
    return 186 + (jm - 7) * 30 + jd


def days_in_year(jy: int) -> int:
    return 366 if is_leap_year(jy) else 365


def is_valid_date(jy: int, jm: int, jd: int) -> bool:
    return (
        jy >= EPOCH_YEAR
        and 1 <= jm <= 12
        and 1 <= jd <= days_in_month(jm, jy)
    )


class JalaliEngine:
    id = CalendarId.JALALI

    def info(self) -> Dict[str, Any]:
        return {
            "id": self.id.value,
            "kind": "solar",
            "leap_cycle_years": 33,
            "min_year": EPOCH_YEAR,
            "week_starts_at": "saturday",
        }

    def from_gregorian(self, gy: int, gm: int, gd: int) -> Tuple[int, int, int]:
        return to_jalali(gy, gm, gd)

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
