#!/usr/bin/env python3
from __future__ import annotations

import argparse
from typing import Dict, List, Optional, Tuple

import multical
from multical.core.types import CalendarId
from multical.diagnostics import _need_matplotlib, _need_numpy

CYCLE_YEARS = {CalendarId.JALALI: 33, CalendarId.HIJRI: 30}


def leap_flags(np, calendar: CalendarId, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    """Years in [start_year, end_year] and a boolean leap flag for each."""
    years = np.arange(start_year, end_year + 1, dtype=int)
    flags = np.array([multical.is_leap_year(int(Y), calendar=calendar) for Y in years], dtype=bool)
    return years, flags


def cycle_positions(np, calendar: CalendarId, years, flags) -> "np.ndarray":
    """Sorted distinct positions (1-based) of leap years inside the leap cycle."""
    cycle = CYCLE_YEARS[calendar]
    if calendar == CalendarId.JALALI:
        # cycles anchored on the epoch year 979
        pos = (years[flags] - 979) % cycle + 1
    else:
        pos = (years[flags] - 1) % cycle + 1
    return np.unique(pos)


def summary(np, calendar: CalendarId, start_year: int, end_year: int) -> Dict[str, float]:
    years, flags = leap_flags(np, calendar, start_year, end_year)
    lengths = np.array([multical.days_in_year(int(Y), calendar=calendar) for Y in years], dtype=float)
    gaps = np.diff(years[flags])
    return {
        "years": int(len(years)),
        "leap_years": int(flags.sum()),
        "leap_share": float(flags.mean()) if len(years) else 0.0,
        "mean_year_days": float(lengths.mean()) if len(years) else 0.0,
        "min_gap": int(gaps.min()) if len(gaps) else 0,
        "max_gap": int(gaps.max()) if len(gaps) else 0,
    }


def plot_barcode(np, plt, calendar: CalendarId, years, flags, out: str) -> None:
    cycle = CYCLE_YEARS[calendar]
    n_rows = (len(years) + cycle - 1) // cycle
    Z = np.zeros(n_rows * cycle, dtype=float)
    Z[: len(flags)] = flags
    Z = Z.reshape(n_rows, cycle)

    fig, ax = plt.subplots(figsize=(10, max(2.0, 0.25 * n_rows)), constrained_layout=True)
    ax.pcolormesh(Z, cmap="Greys", vmin=0, vmax=1, edgecolors="0.88", linewidth=0.6)
    ax.set_xlabel("Year within cycle")
    ax.set_ylabel(f"Cycle from {int(years[0])}")
    ax.set_title(f"{calendar.value} leap years ({int(years[0])}..{int(years[-1])})")
    ax.invert_yaxis()
    fig.savefig(out, dpi=200)
    print(f"Saved: {out}")


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Leap-year statistics for the arithmetic calendars.")
    p.add_argument("--calendar", choices=("jalali", "hijri"), default="jalali")
    p.add_argument("--start-year", type=int, default=None)
    p.add_argument("--end-year", type=int, default=None)
    p.add_argument("--plot", default="", help="Write a leap barcode PNG to this path.")
    args = p.parse_args(argv)

    np = _need_numpy()
    calendar = CalendarId.coerce(args.calendar)
    defaults = {CalendarId.JALALI: (1300, 1500), CalendarId.HIJRI: (1300, 1500)}
    start_year = args.start_year if args.start_year is not None else defaults[calendar][0]
    end_year = args.end_year if args.end_year is not None else defaults[calendar][1]
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    years, flags = leap_flags(np, calendar, start_year, end_year)
    stats = summary(np, calendar, start_year, end_year)
    print(f"{calendar.value} {start_year}..{end_year}")
    for k, v in stats.items():
        print(f"  {k:15s} {v}")
    print("  cycle positions", " ".join(str(int(x)) for x in cycle_positions(np, calendar, years, flags)))

    if args.plot:
        plt = _need_matplotlib()
        plot_barcode(np, plt, calendar, years, flags, args.plot)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
