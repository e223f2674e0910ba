from __future__ import annotations

import argparse
from datetime import date
from typing import List, Tuple

import multical
from multical.core.types import CalendarId

DEFAULT_COLUMNS: List[Tuple[str, CalendarId]] = [
    ("Nowruz", CalendarId.JALALI),
    ("1 Muharram", CalendarId.HIJRI),
]


def mmdd(d: date) -> str:
    return f"{d.month:02d}-{d.day:02d}"


def new_years_in(gy: int, calendar: CalendarId) -> List[Tuple[int, date]]:
    """
    (calendar year, Gregorian date) of every calendar new year that falls in
    Gregorian year `gy`. Hijri years are shorter, so a Gregorian year can hold
    two of them.
    """
    first = multical.from_gregorian(date(gy, 1, 1), calendar=calendar).year
    out = []
    for Y in range(first, first + 3):
        if not multical.is_valid_date(Y, 1, 1, calendar=calendar):
            continue
        d = multical.new_year_day(Y, calendar=calendar)["date"]
        if d.year == gy:
            out.append((Y, d))
    return out


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(
        description="Print the Gregorian dates of Nowruz and 1 Muharram."
    )
    p.add_argument("--from-year", type=int, default=2000)
    p.add_argument("--to-year", type=int, default=2030)
    p.add_argument(
        "--dates",
        choices=("mmdd", "iso"),
        default="mmdd",
        help="Display format in table columns (default: mmdd).",
    )
    args = p.parse_args(argv)

    def fmt(d: date) -> str:
        return mmdd(d) if args.dates == "mmdd" else d.isoformat()

    G0, G1 = args.from_year, args.to_year
    if G1 < G0:
        raise SystemExit("--to-year must be >= --from-year")

    headers = ["Year"] + [name for name, _ in DEFAULT_COLUMNS]
    colw = [5] + [max(24, len(h)) for h in headers[1:]]
    line = "  ".join(h.ljust(w) for h, w in zip(headers, colw))
    print(line)
    print("-" * len(line))

    for gy in range(G0, G1 + 1):
        row = [str(gy).ljust(colw[0])]
        for (_, cal), w in zip(DEFAULT_COLUMNS, colw[1:]):
            hits = new_years_in(gy, cal)
            text = ", ".join(f"{fmt(d)} ({Y})" for Y, d in hits) or "-"
            row.append(text.ljust(w))
        print("  ".join(row).rstrip())

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
