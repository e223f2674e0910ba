"""
multical.formatting
-------------------
PHP `date()`-style templates rendered against a calendar.

Time-of-day and zone tokens read the wrapped datetime directly since they do
not depend on the calendar. Date tokens read the calendar components and,
where textual, the calendar's locale table. Every other character is copied
through, and a backslash copies the character after it. Digit glyphs are
substituted over the finished string.
"""

from __future__ import annotations

import math
from datetime import date, datetime, timezone
from email.utils import format_datetime
from typing import Callable, Dict, Optional

from . import config
from .core.engine import CalendarEngine
from .core.time import calendar_weekday, sunday_weekday
from .core.types import CalendarId, FormatOptions
from .locales.base import apply_digits
from .locales.registry import get_locale

ESCAPE = "\\"


def _offset(dt: datetime, sep: str) -> str:
    total = int(dt.utcoffset().total_seconds()) if dt.utcoffset() is not None else 0
    sign = "-" if total < 0 else "+"
    hh, rem = divmod(abs(total), 3600)
    return f"{sign}{hh:02d}{sep}{rem // 60:02d}"


def _swatch_beat(dt: datetime) -> str:
    utc = dt.astimezone(timezone.utc)
    seconds = (utc.hour * 3600 + utc.minute * 60 + utc.second + 3600) % 86400
    return f"{seconds * 1000 // 86400:03d}"


def zone_name(dt: datetime) -> str:
    key = getattr(dt.tzinfo, "key", None)
    if key:
        return key
    return dt.tzname() or ""


TIME_TOKENS: Dict[str, Callable[[datetime], str]] = {
    "B": _swatch_beat,
    "h": lambda dt: f"{(dt.hour % 12) or 12:02d}",
    "H": lambda dt: f"{dt.hour:02d}",
    "g": lambda dt: str((dt.hour % 12) or 12),
    "G": lambda dt: str(dt.hour),
    "i": lambda dt: f"{dt.minute:02d}",
    "s": lambda dt: f"{dt.second:02d}",
    "I": lambda dt: "1" if dt.dst() else "0",
    "U": lambda dt: str(math.floor(dt.timestamp())),
    "u": lambda dt: f"{dt.microsecond:06d}",
    "v": lambda dt: f"{dt.microsecond // 1000:03d}",
    "Z": lambda dt: str(int(dt.utcoffset().total_seconds()) if dt.utcoffset() is not None else 0),
    "O": lambda dt: _offset(dt, ""),
    "P": lambda dt: _offset(dt, ":"),
    "p": lambda dt: "Z" if not dt.utcoffset() else _offset(dt, ":"),
    "T": lambda dt: dt.tzname() or "",
    "e": zone_name,
    "c": lambda dt: dt.isoformat(timespec="seconds"),
    "r": lambda dt: format_datetime(dt),
}


def first_weekday_of_year(engine: CalendarEngine, year: int) -> int:
    """Calendar weekday index of day 1 of month 1 of `year`."""
    return calendar_weekday(date(*engine.to_gregorian(year, 1, 1)), engine.id)


def week_of_year(engine: CalendarEngine, gdate: date) -> int:
    """
    Week number of `gdate` in the engine's calendar.

    Gregorian uses the ISO week. The other calendars count
    ceil((day_of_year + weekday of the year's first day) / 7).
    """
    if engine.id == CalendarId.GREGORIAN:
        return gdate.isocalendar()[1]
    y, m, d = engine.from_gregorian(gdate.year, gdate.month, gdate.day)
    return math.ceil((engine.day_of_year(y, m, d) + first_weekday_of_year(engine, y)) / 7)


def format_datetime_as(
    dt: datetime,
    engine: CalendarEngine,
    template: Optional[str] = None,
    options: Optional[FormatOptions] = None,
) -> str:
    """Render `dt` through `template` in the calendar of `engine`."""
    opts = options if options is not None else config.get_options()
    fmt = template if template is not None else opts.template
    cal = engine.id
    locale = get_locale(cal)
    gdate = dt.date()
    y, m, d = engine.from_gregorian(gdate.year, gdate.month, gdate.day)
    sunday_wd = sunday_weekday(gdate)
    cal_wd = calendar_weekday(gdate, cal)

    out = []
    i, n = 0, len(fmt)
    while i < n:
        ch = fmt[i]
        i += 1

        if ch == ESCAPE:
            if i < n:
                out.append(fmt[i])
                i += 1
            continue

        if ch in TIME_TOKENS:
            out.append(TIME_TOKENS[ch](dt))
        elif ch == "Y":
            out.append(str(y))
        elif ch == "y":
            out.append(f"{y % 100:02d}")
        elif ch == "m":
            out.append(f"{m:02d}")
        elif ch == "n":
            out.append(str(m))
        elif ch == "F":
            out.append(locale.month_name(m))
        elif ch == "M":
            out.append(locale.month_name_short(m))
        elif ch == "d":
            out.append(f"{d:02d}")
        elif ch == "j":
            out.append(str(d))
        elif ch == "D":
            out.append(locale.weekday_name_short(sunday_wd))
        elif ch == "l":
            out.append(locale.weekday_name(sunday_wd))
        elif ch == "w":
            out.append(str(cal_wd))
        elif ch == "N":
            if cal == CalendarId.GREGORIAN:
                out.append(str(gdate.isoweekday()))
            else:
                out.append(str(cal_wd or 7))
        elif ch == "A":
            out.append(locale.meridiem(dt.hour >= 12))
        elif ch == "a":
            out.append(locale.meridiem(dt.hour >= 12, short=True))
        elif ch == "S":
            out.append(locale.ordinal_suffix(d))
        elif ch == "t":
            out.append(str(engine.days_in_month(m, y)))
        elif ch == "L":
            out.append("1" if engine.is_leap_year(y) else "0")
        elif ch == "z":
            out.append(str(engine.day_of_year(y, m, d) - 1))
        elif ch == "W":
            week = week_of_year(engine, gdate)
            out.append(f"{week:02d}" if cal == CalendarId.GREGORIAN else str(week))
        else:
            out.append(ch)

    return apply_digits("".join(out), opts.digits)
