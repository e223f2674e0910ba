from __future__ import annotations
from datetime import date
from typing import Tuple

from .types import CalendarId

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def jdn_from_ymd(y: int, m: int, day: int) -> int:
    """Proleptic Gregorian (y, m, d) -> Julian Day Number (Fliegel-Van Flandern)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def ymd_from_jdn(jdn: int) -> Tuple[int, int, int]:
    """Inverse of jdn_from_ymd."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def to_jdn(d: date) -> int:
    """Convert Gregorian date to Julian Day Number (JDN)."""
    return jdn_from_ymd(d.year, d.month, d.day)


def from_jdn(jdn: int) -> date:
    return date(*ymd_from_jdn(jdn))


def sunday_weekday(d: date) -> int:
    """Weekday index with 0=Sunday .. 6=Saturday."""
    return d.isoweekday() % 7


def is_gregorian_leap(y: int) -> bool:
    return (y % 4 == 0 and y % 100 != 0) or y % 400 == 0


def gregorian_days_in_month(m: int, y: int) -> int:
    if m == 2 and is_gregorian_leap(y):
        return 29
    return _GREGORIAN_MONTH_DAYS[m - 1]


def gregorian_day_of_year(y: int, m: int, d: int) -> int:
    return sum(gregorian_days_in_month(i, y) for i in range(1, m)) + d


def calendar_weekday(d: date, calendar: CalendarId) -> int:
    """
    Weekday index in the week convention of `calendar`.

    Gregorian keeps 0=Sunday; the Jalali and Hijri weeks start on Saturday,
    so Saturday=0 .. Friday=6.
    """
    wd = sunday_weekday(d)
    if calendar == CalendarId.GREGORIAN:
        return wd
    return (wd + 1) % 7
