from __future__ import annotations

import argparse
import importlib
import inspect
import logging
import re
import sys

from multical.core.errors import MulticalError

_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

CALENDARS = ("jalali", "hijri", "gregorian")
DIGITS = ("latin", "farsi", "arabic")


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _options(args: argparse.Namespace):
    from multical import config
    from multical.core.types import FormatOptions

    base = config.get_options()
    return FormatOptions(
        template=args.format if args.format else base.template,
        digits=args.digits if args.digits else base.digits,
    )


def _add_format_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--calendar", choices=CALENDARS, default="jalali")
    p.add_argument("--format", default=None, help='Template, e.g. "l j F Y" (default: Y/m/d H:i:s)')
    p.add_argument("--digits", choices=DIGITS, default=None)


def cmd_day(argv: list[str]) -> int:
    from multical.moment import Moment

    p = argparse.ArgumentParser(prog="multical day", description="Gregorian date -> calendar date")
    p.add_argument("date", help="YYYY-MM-DD or any ISO 8601 datetime")
    p.add_argument("--tz", default=None, help="IANA zone name (default: configured zone)")
    _add_format_args(p)
    args = p.parse_args(argv)

    m = Moment(args.date, calendar=args.calendar, tz=args.tz)
    print(m.format(options=_options(args)))
    return 0


def cmd_now(argv: list[str]) -> int:
    from multical.moment import Moment

    p = argparse.ArgumentParser(prog="multical now", description="Current time in a calendar")
    p.add_argument("--tz", default=None, help="IANA zone name (default: configured zone)")
    _add_format_args(p)
    args = p.parse_args(argv)

    print(Moment.now(args.calendar, tz=args.tz).format(options=_options(args)))
    return 0


def cmd_to_gregorian(argv: list[str]) -> int:
    import multical
    from multical.core.types import CalendarDate, CalendarId

    p = argparse.ArgumentParser(prog="multical to-gregorian", description="Calendar date -> Gregorian date")
    p.add_argument("year", type=int)
    p.add_argument("month", type=int)
    p.add_argument("day", type=int)
    p.add_argument("--calendar", choices=CALENDARS, default="jalali")
    args = p.parse_args(argv)

    cd = CalendarDate(CalendarId.coerce(args.calendar), args.year, args.month, args.day)
    print(multical.to_gregorian(cd).isoformat())
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    # Shorthand: `multical YYYY-MM-DD ...`
    if argv and _DATE_RE.match(argv[0]):
        argv = ["day"] + argv

    p = argparse.ArgumentParser(prog="multical", description="Jalali / Hijri / Gregorian calendar toolkit CLI.")
    p.add_argument("-v", "--verbose", action="store_true", help="Log at DEBUG level")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("day", help="Gregorian date -> calendar date", add_help=False)
    sub.add_parser("now", help="Current time in a calendar", add_help=False)
    sub.add_parser("to-gregorian", help="Calendar date -> Gregorian date", add_help=False)
    sub.add_parser("month", help="Print a calendar month grid", add_help=False)
    sub.add_parser("new-years", help="Print Nowruz / 1 Muharram table", add_help=False)

    p_diag = sub.add_parser("diag", help="Diagnostics tools")
    p_diag.add_argument(
        "tool",
        choices=["round-trip", "leap-years", "new-year-scatter"],
        help="Which diagnostic to run",
    )

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.cmd == "day":
            return cmd_day(rest)

        if args.cmd == "now":
            return cmd_now(rest)

        if args.cmd == "to-gregorian":
            return cmd_to_gregorian(rest)

        if args.cmd == "month":
            return _run_module_main("multical.diagnostics.pretty_month", rest)

        if args.cmd == "new-years":
            return _run_module_main("multical.diagnostics.new_years_table", rest)

        if args.cmd == "diag":
            tool_map = {
                "round-trip": "multical.diagnostics.round_trip",
                "leap-years": "multical.diagnostics.leap_years",
                "new-year-scatter": "multical.diagnostics.new_year_scatter",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except MulticalError as e:
        print(f"multical: error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
