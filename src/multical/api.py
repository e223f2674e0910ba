from __future__ import annotations

from datetime import date, datetime
from typing import Any, Dict, List, Optional, Union

from .core.engine import CalendarEngine, EngineRegistry
from .core.types import CalendarDate, CalendarId

_registry: Optional[EngineRegistry] = None

CalendarLike = Union[CalendarId, str]


def set_registry(reg: EngineRegistry) -> None:
    global _registry
    _registry = reg


def _reg() -> EngineRegistry:
    if _registry is None:
        raise RuntimeError("Engine registry not initialized")
    return _registry


def list_calendars() -> List[str]:
    return _reg().list()


def calendar_info(calendar: CalendarLike) -> Dict[str, Any]:
    return _reg().get(calendar).info()


def get_engine(calendar: CalendarLike) -> CalendarEngine:
    return _reg().get(calendar)


def register_engine(name: str, engine: CalendarEngine, *, overwrite: bool = False) -> None:
    _reg().register(name, engine, overwrite=overwrite)


# ============================================================
# Conversion
# ============================================================

def from_gregorian(d: date, *, calendar: CalendarLike = CalendarId.JALALI) -> CalendarDate:
    eng = _reg().get(calendar)
    return CalendarDate(eng.id, *eng.from_gregorian(d.year, d.month, d.day))


def to_gregorian(cd: CalendarDate) -> date:
    eng = _reg().get(cd.calendar)
    eng.validate(cd.year, cd.month, cd.day)
    return date(*eng.to_gregorian(cd.year, cd.month, cd.day))


# ============================================================
# Calendar rules
# ============================================================

def is_leap_year(year: int, *, calendar: CalendarLike = CalendarId.JALALI) -> bool:
    return _reg().get(calendar).is_leap_year(year)


def days_in_month(year: int, month: int, *, calendar: CalendarLike = CalendarId.JALALI) -> int:
    return _reg().get(calendar).days_in_month(month, year)


def days_in_year(year: int, *, calendar: CalendarLike = CalendarId.JALALI) -> int:
    return _reg().get(calendar).days_in_year(year)


def is_valid_date(year: int, month: int, day: int, *, calendar: CalendarLike = CalendarId.JALALI) -> bool:
    return _reg().get(calendar).is_valid_date(year, month, day)


# ============================================================
# Month / year bounds
# ============================================================

def month_bounds(Y: int, M: int, *, calendar: CalendarLike = CalendarId.JALALI) -> Dict[str, Any]:
    eng = _reg().get(calendar)
    eng.validate(Y, M, 1)
    last = eng.days_in_month(M, Y)
    return {
        "Y": Y,
        "M": M,
        "calendar": eng.id.value,
        "days": last,
        "first_date": date(*eng.to_gregorian(Y, M, 1)),
        "last_date": date(*eng.to_gregorian(Y, M, last)),
    }


def first_day_of_month(Y: int, M: int, *, calendar: CalendarLike = CalendarId.JALALI) -> date:
    return month_bounds(Y, M, calendar=calendar)["first_date"]


def last_day_of_month(Y: int, M: int, *, calendar: CalendarLike = CalendarId.JALALI) -> date:
    return month_bounds(Y, M, calendar=calendar)["last_date"]


def new_year_day(Y: int, *, calendar: CalendarLike = CalendarId.JALALI) -> Dict[str, Any]:
    eng = _reg().get(calendar)
    eng.validate(Y, 1, 1)
    return {
        "Y": Y,
        "calendar": eng.id.value,
        "date": date(*eng.to_gregorian(Y, 1, 1)),
        "leap": eng.is_leap_year(Y),
        "days": eng.days_in_year(Y),
    }


# ============================================================
# Moments
# ============================================================

def make_moment(value: Any = None, calendar: CalendarLike = CalendarId.JALALI, tz=None):
    from .moment import Moment
    return Moment(value, calendar, tz)


def jdate(template: Optional[str] = None, value: Union[date, datetime, str, float, None] = None, tz=None):
    """A Jalali moment, or its formatted text when `template` is given."""
    m = make_moment(value, CalendarId.JALALI, tz)
    return m if template is None else m.format(template)


def hdate(template: Optional[str] = None, value: Union[date, datetime, str, float, None] = None, tz=None):
    """A Hijri moment, or its formatted text when `template` is given."""
    m = make_moment(value, CalendarId.HIJRI, tz)
    return m if template is None else m.format(template)
