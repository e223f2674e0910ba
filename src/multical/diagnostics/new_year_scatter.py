#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional, Tuple

from multical.core.types import CalendarId
from multical.diagnostics import _need_matplotlib, _need_numpy
from multical.diagnostics.new_years_table import new_years_in


def day_of_year(d: date) -> int:
    return (d - date(d.year, 1, 1)).days + 1


def days_since_winter_solstice(d: date) -> int:
    """Days since Dec 22 of the previous Gregorian year (Dec 22 = 1)."""
    ws = date(d.year - 1, 12, 22)
    return (d - ws).days + 1


@dataclass(frozen=True)
class Style:
    label: str
    color: str
    marker: str
    size: float = 16.0
    hollow: bool = False


STYLES: Dict[CalendarId, Style] = {
    CalendarId.JALALI: Style("Nowruz", "tab:blue", "o", size=12),
    CalendarId.HIJRI: Style("1 Muharram", "0.45", "o", size=18, hollow=True),
}


def build_series(np, calendar: CalendarId, start_year: int, end_year: int, *, metric: str) -> Tuple["np.ndarray", "np.ndarray"]:
    """Gregorian year and metric value of each new year of `calendar` in the range."""
    xs: List[int] = []
    ys: List[float] = []
    for gy in range(start_year, end_year + 1):
        for _, d in new_years_in(gy, calendar):
            if metric == "doy":
                ys.append(float(day_of_year(d)))
            elif metric == "since-solstice":
                ys.append(float(days_since_winter_solstice(d)))
            else:
                raise ValueError("metric must be 'doy' or 'since-solstice'")
            xs.append(gy)
    return np.array(xs, dtype=int), np.array(ys, dtype=float)


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Scatter plot of new-year dates against the Gregorian year.")
    p.add_argument("--start-year", type=int, default=1900)
    p.add_argument("--end-year", type=int, default=2100)
    p.add_argument("--outbase", default="new_year_scatter", help="Output base name (writes .png)")
    p.add_argument(
        "--metric",
        choices=("since-solstice", "doy"),
        default="doy",
        help="Y-axis metric (default: day of year).",
    )
    args = p.parse_args(argv)

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(9.2, 4.8), constrained_layout=True)
    ax.set_axisbelow(True)
    ax.grid(True, which="major", color="0.88", linewidth=0.7)
    ax.set_xlabel("Gregorian year")
    if args.metric == "doy":
        ax.set_ylabel("Day-of-year (Jan 1 = 1)")
    else:
        ax.set_ylabel("Days since winter solstice (Dec 22 = 1)")
    ax.set_title("Nowruz and 1 Muharram in the Gregorian year")

    for cal, st in STYLES.items():
        x, y = build_series(np, cal, args.start_year, args.end_year, metric=args.metric)
        if st.hollow:
            ax.scatter(x, y, s=st.size, marker=st.marker, facecolors="none",
                       edgecolors=st.color, alpha=0.60, label=st.label)
        else:
            ax.scatter(x, y, s=st.size, marker=st.marker, c=st.color, alpha=0.35, label=st.label)

    ax.legend(loc="center left", bbox_to_anchor=(1.02, 0.5), frameon=False)
    fig.savefig(args.outbase + ".png", dpi=300)
    print(f"Saved: {args.outbase}.png")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
