# tests/test_time.py

import random
from datetime import date, timedelta

from multical.core import time as t
from multical.core.types import CalendarId


def test_jdn_date_roundtrip():
    random.seed(42)
    # year 1 .. 9999, the datetime range
    for _ in range(10000):
        jdn_in = random.randint(1721426, 5373484)
        d = t.from_jdn(jdn_in)
        assert t.to_jdn(d) == jdn_in


def test_jdn_is_continuous():
    random.seed(7)
    for _ in range(2000):
        d = date(1, 1, 1) + timedelta(days=random.randint(0, 3_000_000))
        assert t.to_jdn(d + timedelta(days=1)) == t.to_jdn(d) + 1


def test_known_epochs():
    assert t.to_jdn(date(2000, 1, 1)) == 2451545
    assert t.to_jdn(date(1970, 1, 1)) == 2440588
    assert t.ymd_from_jdn(2451545) == (2000, 1, 1)


def test_weekday_conventions():
    friday = date(2025, 3, 21)
    saturday = date(2025, 3, 22)
    assert t.sunday_weekday(friday) == 5
    assert t.sunday_weekday(date(2025, 3, 23)) == 0

    # Friday is the last day of the Jalali/Hijri week
    assert t.calendar_weekday(friday, CalendarId.JALALI) == 6
    assert t.calendar_weekday(friday, CalendarId.HIJRI) == 6
    assert t.calendar_weekday(saturday, CalendarId.JALALI) == 0
    assert t.calendar_weekday(friday, CalendarId.GREGORIAN) == 5


def test_gregorian_rules():
    assert t.is_gregorian_leap(2000)
    assert t.is_gregorian_leap(2024)
    assert not t.is_gregorian_leap(1900)
    assert not t.is_gregorian_leap(2023)
    assert t.gregorian_days_in_month(2, 2024) == 29
    assert t.gregorian_days_in_month(2, 2023) == 28
    assert t.gregorian_day_of_year(2024, 3, 1) == 61
    assert t.gregorian_day_of_year(2023, 12, 31) == 365
