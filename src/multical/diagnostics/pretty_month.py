from __future__ import annotations

import argparse
from datetime import timedelta
from typing import List, Optional, Tuple

import multical
from multical.core.time import calendar_weekday
from multical.core.types import CalendarId
from multical.locales.registry import get_locale
from multical.moment import WEEK_STARTS_AT

Cell = Tuple[str, str]


def dow_header(calendar: CalendarId, w: int = 6) -> str:
    locale = get_locale(calendar)
    start = WEEK_STARTS_AT[calendar]
    names = []
    for i in range(7):
        cal_wd = (start + i) % 7
        sunday_wd = cal_wd if calendar == CalendarId.GREGORIAN else (cal_wd + 6) % 7
        names.append(locale.weekday_name_short(sunday_wd)[:w].ljust(w))
    return " ".join(names)


def cell(top: str, bot: str, w: int = 6) -> Cell:
    return (top[:w].ljust(w), bot[:w].ljust(w))


def month_weeks(Y: int, M: int, calendar: CalendarId) -> List[List[Cell]]:
    """
    Week rows for calendar month Y/M. The top line of each cell is the
    calendar day, the bottom line the Gregorian MM-DD.
    """
    b = multical.month_bounds(Y, M, calendar=calendar)
    d0, d1 = b["first_date"], b["last_date"]

    weeks: List[List[Cell]] = []
    wk: List[Cell] = []
    pad = (calendar_weekday(d0, calendar) - WEEK_STARTS_AT[calendar]) % 7
    for _ in range(pad):
        wk.append(cell("", ""))

    d, day = d0, 1
    while d <= d1:
        wk.append(cell(f"{day:2d}", f"{d.month:02d}-{d.day:02d}"))
        if len(wk) == 7:
            weeks.append(wk)
            wk = []
        d += timedelta(days=1)
        day += 1
    if wk:
        while len(wk) < 7:
            wk.append(cell("", ""))
        weeks.append(wk)
    return weeks


def render_month(Y: int, M: int, calendar: CalendarId) -> str:
    calendar = CalendarId.coerce(calendar)
    b = multical.month_bounds(Y, M, calendar=calendar)
    header = dow_header(calendar)
    name = get_locale(calendar).month_name(M)
    lines = [
        f"{calendar.value} month  Y={Y}  M={M} {name}   ({b['first_date']} .. {b['last_date']})",
        header,
        "-" * len(header),
    ]
    for wk in month_weeks(Y, M, calendar):
        lines.append(" ".join(c[0] for c in wk).rstrip())
        lines.append(" ".join(c[1] for c in wk).rstrip())
    return "\n".join(lines) + "\n"


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Print a calendar month with the matching Gregorian dates."
    )
    p.add_argument("year", nargs="?", type=int)
    p.add_argument("month", nargs="?", type=int)
    p.add_argument("--calendar", default="jalali", help="jalali|hijri|gregorian (default: jalali)")
    args = p.parse_args(argv)

    calendar = CalendarId.coerce(args.calendar)
    if args.year is None or args.month is None:
        # current month
        today = multical.Moment.now(calendar)
        Y, M = today.year, today.month
    else:
        Y, M = args.year, args.month

    print(render_month(Y, M, calendar))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
