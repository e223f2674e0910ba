from __future__ import annotations

import argparse
import random
from datetime import date, timedelta
from typing import List

import multical
from multical.core.types import CalendarDate


def parse_date(s: str) -> date:
    y, m, d = s.split("-")
    return date(int(y), int(m), int(d))


def random_date(start: date, end: date) -> date:
    span = (end - start).days
    return start + timedelta(days=random.randint(0, span))


def parse_calendars(s: str) -> List[str]:
    # "jalali,hijri" -> ["jalali", "hijri"]
    return [x.strip() for x in s.split(",") if x.strip()]


def roundtrip_test(
    calendar: str,
    N: int,
    start: date,
    end: date,
    seed: int,
    *,
    max_failures: int,
) -> int:
    """
    Gregorian -> calendar -> Gregorian for N random days in [start, end], then
    calendar -> Gregorian -> calendar for N random valid calendar dates in
    the same span. Returns the number of failures.
    """
    random.seed(seed)
    failures = 0
    lo = multical.from_gregorian(start, calendar=calendar).year
    hi = multical.from_gregorian(end, calendar=calendar).year

    for _ in range(N):
        d0 = random_date(start, end)
        cd = multical.from_gregorian(d0, calendar=calendar)
        back = multical.to_gregorian(cd)
        if back != d0:
            failures += 1
            print("\nFAIL (gregorian -> calendar -> gregorian)")
            print("calendar:", calendar)
            print("d0:", d0)
            print("cal:", cd)
            print("back:", back)
            if failures >= max_failures:
                return failures

        y = random.randint(lo, hi)
        m = random.randint(1, 12)
        d = random.randint(1, multical.days_in_month(y, m, calendar=calendar))
        c0 = CalendarDate(cd.calendar, y, m, d)
        c1 = multical.from_gregorian(multical.to_gregorian(c0), calendar=calendar)
        if c1 != c0:
            failures += 1
            print("\nFAIL (calendar -> gregorian -> calendar)")
            print("c0:", c0, "c1:", c1)
            if failures >= max_failures:
                return failures

    return failures


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(description="Random round-trip tests: gregorian <-> calendar.")
    p.add_argument("--calendars", type=str, default="jalali,hijri",
                   help="Comma-separated calendar list.")
    p.add_argument("--N", type=int, default=2000, help="Trials per calendar.")
    p.add_argument("--start", type=str, default="1700-01-01", help="Start date YYYY-MM-DD.")
    p.add_argument("--end", type=str, default="2400-12-31", help="End date YYYY-MM-DD.")
    p.add_argument("--seed", type=int, default=123, help="RNG seed.")
    p.add_argument("--max-failures", type=int, default=5, help="Stop after this many failures per calendar.")
    args = p.parse_args(argv)

    calendars = parse_calendars(args.calendars)
    start = parse_date(args.start)
    end = parse_date(args.end)

    if end < start:
        raise SystemExit("--end must be >= --start")

    total_fail = 0
    for cal in calendars:
        print(f"Testing {cal} ...")
        total_fail += roundtrip_test(cal, N=args.N, start=start, end=end, seed=args.seed, max_failures=args.max_failures)

    if total_fail == 0:
        print("All round-trip tests passed.")
        return 0

    print(f"Round-trip failures: {total_fail}")
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
