"""
multical.moment
---------------
A calendar-aware view over one timezone-aware `datetime`.

A Moment owns a Gregorian `datetime` and an active calendar. Reads convert
the wrapped date into the active calendar; writes validate calendar
components, convert them back and replace the wrapped value. Switching the
active calendar never touches the wrapped instant.

Month and year arithmetic is done on calendar components and clamps the day
to the target month. Day and week arithmetic runs on the wall clock; hour,
minute and second arithmetic runs on elapsed time.
"""

from __future__ import annotations

import math
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from typing import Any, Dict, Optional, Tuple, Union

from dateutil.parser import isoparse

from . import config
from .api import get_engine
from .core.engine import CalendarEngine
from .core.errors import ParseError, ValidationError
from .core.time import calendar_weekday, sunday_weekday
from .core.types import CalendarDate, CalendarId, FormatOptions
from .formatting import format_datetime_as, week_of_year, zone_name
from .locales.registry import get_locale
from .parsing import parse_components
from .relative import DAY, MONTH, YEAR, describe

CalendarLike = Union[CalendarId, str]

# weekday indices in each calendar's own week convention
WEEKEND_DAYS = {
    CalendarId.JALALI: frozenset({6}),          # Friday
    CalendarId.HIJRI: frozenset({6}),           # Friday
    CalendarId.GREGORIAN: frozenset({0, 6}),    # Sunday, Saturday
}
WEEK_STARTS_AT = {CalendarId.JALALI: 0, CalendarId.HIJRI: 0, CalendarId.GREGORIAN: 1}
WEEK_ENDS_AT = {CalendarId.JALALI: 6, CalendarId.HIJRI: 6, CalendarId.GREGORIAN: 0}


def _check_time(hour: int, minute: int, second: int, microsecond: int) -> None:
    if not (0 <= hour <= 23):
        raise ValidationError(f"Invalid hour {hour} (expected 0..23)")
    if not (0 <= minute <= 59):
        raise ValidationError(f"Invalid minute {minute} (expected 0..59)")
    if not (0 <= second <= 59):
        raise ValidationError(f"Invalid second {second} (expected 0..59)")
    if not (0 <= microsecond <= 999999):
        raise ValidationError(f"Invalid microsecond {microsecond} (expected 0..999999)")


def to_aware_datetime(value: Any, tz: config.TzLike = None) -> datetime:
    """
    Coerce `value` to a timezone-aware datetime.

    Accepts None or "now" (the configured clock), a Moment, a datetime, a
    date (midnight), a POSIX timestamp or an ISO 8601 string. Naive values get
    `tz`, or the default zone when `tz` is None; aware values are converted
    to `tz` when it is given.
    """
    if value is None or (isinstance(value, str) and value.strip().lower() == "now"):
        return config.now(tz)
    if isinstance(value, Moment):
        dt = value.datetime
    elif isinstance(value, datetime):
        dt = value
    elif isinstance(value, date):
        dt = datetime.combine(value, time())
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        return datetime.fromtimestamp(value, config.resolve_timezone(tz))
    elif isinstance(value, str):
        try:
            dt = isoparse(value.strip())
        except ValueError as e:
            raise ParseError(f"Could not parse '{value}' as an ISO 8601 datetime: {e}") from None
    else:
        raise TypeError(f"Cannot build a Moment from {type(value).__name__}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=config.resolve_timezone(tz))
    if tz is not None:
        return dt.astimezone(config.resolve_timezone(tz))
    return dt


class Moment:
    """
    Mutable calendar-aware moment.

    Mutators return ``self`` so calls chain::

        Moment.create_jalali(1403, 12, 30).add_years(1).format("Y/m/d")  # 1404/12/29
    """

    def __init__(
        self,
        value: Any = None,
        calendar: CalendarLike = CalendarId.JALALI,
        tz: config.TzLike = None,
    ) -> None:
        self._calendar = CalendarId.coerce(calendar)
        self._dt = to_aware_datetime(value, tz)

    # ------------------------------------------------------------------
    # construction
    # ------------------------------------------------------------------

    @classmethod
    def now(cls, calendar: CalendarLike = CalendarId.JALALI, tz: config.TzLike = None) -> "Moment":
        return cls(None, calendar, tz)

    @classmethod
    def parse(cls, value: Any, calendar: CalendarLike = CalendarId.JALALI, tz: config.TzLike = None) -> "Moment":
        return cls(value, calendar, tz)

    @classmethod
    def from_datetime(cls, dt: datetime, calendar: CalendarLike = CalendarId.JALALI, tz: config.TzLike = None) -> "Moment":
        return cls(dt, calendar, tz)

    @classmethod
    def from_timestamp(cls, ts: float, calendar: CalendarLike = CalendarId.JALALI, tz: config.TzLike = None) -> "Moment":
        return cls(ts, calendar, tz)

    @classmethod
    def create(
        cls,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        microsecond: int = 0,
        *,
        calendar: CalendarLike = CalendarId.JALALI,
        tz: config.TzLike = None,
    ) -> "Moment":
        """
        Build from calendar components. Omitted date fields take today's
        value in `calendar`. Raises ValidationError for an invalid date.
        """
        m = cls(None, calendar, tz)
        cy, cm, cd = m.components().as_tuple()
        return m.set_date_time(
            cy if year is None else year,
            cm if month is None else month,
            cd if day is None else day,
            hour, minute, second, microsecond,
        )

    @classmethod
    def create_from_date(
        cls,
        year: Optional[int] = None,
        month: Optional[int] = None,
        day: Optional[int] = None,
        *,
        calendar: CalendarLike = CalendarId.JALALI,
        tz: config.TzLike = None,
    ) -> "Moment":
        """Like create() but keeps the current time of day."""
        m = cls(None, calendar, tz)
        cy, cm, cd = m.components().as_tuple()
        return m.set_date(
            cy if year is None else year,
            cm if month is None else month,
            cd if day is None else day,
        )

    @classmethod
    def create_jalali(cls, year=None, month=None, day=None, hour=0, minute=0, second=0, tz=None) -> "Moment":
        return cls.create(year, month, day, hour, minute, second, calendar=CalendarId.JALALI, tz=tz)

    @classmethod
    def create_hijri(cls, year=None, month=None, day=None, hour=0, minute=0, second=0, tz=None) -> "Moment":
        return cls.create(year, month, day, hour, minute, second, calendar=CalendarId.HIJRI, tz=tz)

    @classmethod
    def create_gregorian(cls, year=None, month=None, day=None, hour=0, minute=0, second=0, tz=None) -> "Moment":
        return cls.create(year, month, day, hour, minute, second, calendar=CalendarId.GREGORIAN, tz=tz)

    @classmethod
    def parse_format(
        cls,
        template: str,
        text: str,
        calendar: CalendarLike = CalendarId.JALALI,
        tz: config.TzLike = None,
    ) -> "Moment":
        """Parse `text` laid out as `template`, reading it as a date in `calendar`."""
        engine = get_engine(CalendarId.coerce(calendar))
        parts = parse_components(template, text, engine)
        return cls.create(**parts, calendar=calendar, tz=tz)

    def copy(self) -> "Moment":
        new = self.__class__.__new__(self.__class__)
        new._dt = self._dt
        new._calendar = self._calendar
        return new

    __copy__ = copy

    # ------------------------------------------------------------------
    # calendar selector
    # ------------------------------------------------------------------

    @property
    def calendar(self) -> CalendarId:
        return self._calendar

    def set_calendar(self, calendar: CalendarLike) -> "Moment":
        self._calendar = CalendarId.coerce(calendar)
        return self

    def use_jalali(self) -> "Moment":
        return self.set_calendar(CalendarId.JALALI)

    def use_hijri(self) -> "Moment":
        return self.set_calendar(CalendarId.HIJRI)

    def use_gregorian(self) -> "Moment":
        return self.set_calendar(CalendarId.GREGORIAN)

    def is_jalali(self) -> bool:
        return self._calendar == CalendarId.JALALI

    def is_hijri(self) -> bool:
        return self._calendar == CalendarId.HIJRI

    def is_gregorian(self) -> bool:
        return self._calendar == CalendarId.GREGORIAN

    @property
    def _engine(self) -> CalendarEngine:
        return get_engine(self._calendar)

    # ------------------------------------------------------------------
    # reads
    # ------------------------------------------------------------------

    def _components_of(self, dt: datetime) -> Tuple[int, int, int]:
        return self._engine.from_gregorian(dt.year, dt.month, dt.day)

    def components(self) -> CalendarDate:
        """Date of the wrapped instant in the active calendar."""
        return CalendarDate(self._calendar, *self._components_of(self._dt))

    @property
    def year(self) -> int:
        return self.components().year

    @property
    def month(self) -> int:
        return self.components().month

    @property
    def day(self) -> int:
        return self.components().day

    @property
    def hour(self) -> int:
        return self._dt.hour

    @property
    def minute(self) -> int:
        return self._dt.minute

    @property
    def second(self) -> int:
        return self._dt.second

    @property
    def microsecond(self) -> int:
        return self._dt.microsecond

    @property
    def tzinfo(self) -> tzinfo:
        return self._dt.tzinfo

    @property
    def timezone_name(self) -> str:
        return zone_name(self._dt)

    def timestamp(self) -> float:
        return self._dt.timestamp()

    @property
    def int_timestamp(self) -> int:
        return math.floor(self._dt.timestamp())

    @property
    def datetime(self) -> datetime:
        return self._dt

    def to_datetime(self) -> datetime:
        return self._dt

    def to_date(self) -> date:
        """Gregorian date of the wrapped instant."""
        return self._dt.date()

    @property
    def day_of_week(self) -> int:
        """0=Saturday for Jalali and Hijri, 0=Sunday for Gregorian."""
        return calendar_weekday(self._dt.date(), self._calendar)

    @property
    def gregorian_weekday(self) -> int:
        return sunday_weekday(self._dt.date())

    @property
    def days_in_month(self) -> int:
        y, m, _ = self._components_of(self._dt)
        return self._engine.days_in_month(m, y)

    @property
    def days_in_year(self) -> int:
        return self._engine.days_in_year(self.year)

    @property
    def day_of_year(self) -> int:
        y, m, d = self._components_of(self._dt)
        return self._engine.day_of_year(y, m, d)

    @property
    def quarter(self) -> int:
        return (self.month + 2) // 3

    @property
    def week_of_month(self) -> int:
        return (self.day + 6) // 7

    @property
    def week_of_year(self) -> int:
        return week_of_year(self._engine, self._dt.date())

    def is_leap_year(self) -> bool:
        return self._engine.is_leap_year(self.year)

    @property
    def month_name(self) -> str:
        return get_locale(self._calendar).month_name(self.month)

    @property
    def month_name_short(self) -> str:
        return get_locale(self._calendar).month_name_short(self.month)

    @property
    def day_name(self) -> str:
        return get_locale(self._calendar).weekday_name(self.gregorian_weekday)

    @property
    def day_name_short(self) -> str:
        return get_locale(self._calendar).weekday_name_short(self.gregorian_weekday)

    def to_dict(self) -> Dict[str, int]:
        y, m, d = self._components_of(self._dt)
        return {
            "year": y,
            "month": m,
            "day": d,
            "hour": self._dt.hour,
            "minute": self._dt.minute,
            "second": self._dt.second,
        }

    def to_tuple(self) -> Tuple[int, int, int, int, int, int]:
        return tuple(self.to_dict().values())

    # ------------------------------------------------------------------
    # writes
    # ------------------------------------------------------------------

    def _replace(self, **fields: int) -> "Moment":
        try:
            self._dt = self._dt.replace(**fields)
        except (ValueError, OverflowError) as e:
            raise ValidationError(str(e)) from None
        return self

    def _gregorian_fields(self, year: int, month: int, day: int) -> Dict[str, int]:
        engine = self._engine
        engine.validate(year, month, day)
        gy, gm, gd = engine.to_gregorian(year, month, day)
        return {"year": gy, "month": gm, "day": gd}

    def set_date(self, year: int, month: int, day: int) -> "Moment":
        """Write a date of the active calendar, keeping the time of day."""
        return self._replace(**self._gregorian_fields(year, month, day))

    def set_year(self, year: int) -> "Moment":
        _, m, d = self._components_of(self._dt)
        return self.set_date(year, m, d)

    def set_month(self, month: int) -> "Moment":
        y, _, d = self._components_of(self._dt)
        return self.set_date(y, month, d)

    def set_day(self, day: int) -> "Moment":
        y, m, _ = self._components_of(self._dt)
        return self.set_date(y, m, day)

    def set_time(self, hour: int, minute: int, second: int = 0, microsecond: int = 0) -> "Moment":
        _check_time(hour, minute, second, microsecond)
        return self._replace(hour=hour, minute=minute, second=second, microsecond=microsecond)

    def set_date_time(
        self,
        year: int,
        month: int,
        day: int,
        hour: int,
        minute: int,
        second: int = 0,
        microsecond: int = 0,
    ) -> "Moment":
        _check_time(hour, minute, second, microsecond)
        fields = self._gregorian_fields(year, month, day)
        return self._replace(hour=hour, minute=minute, second=second, microsecond=microsecond, **fields)

    def set_timestamp(self, ts: float) -> "Moment":
        self._dt = datetime.fromtimestamp(ts, self._dt.tzinfo)
        return self

    def set_timezone(self, tz: config.TzLike) -> "Moment":
        """Same instant, expressed in `tz`."""
        self._dt = self._dt.astimezone(config.resolve_timezone(tz))
        return self

    # ------------------------------------------------------------------
    # arithmetic
    # ------------------------------------------------------------------

    def add_months(self, value: int = 1) -> "Moment":
        y, m, d = self._components_of(self._dt)
        new_year, month_index = divmod(y * 12 + (m - 1) + int(value), 12)
        new_month = month_index + 1
        return self.set_date(new_year, new_month, min(d, self._engine.days_in_month(new_month, new_year)))

    def sub_months(self, value: int = 1) -> "Moment":
        return self.add_months(-int(value))

    def add_month(self) -> "Moment":
        return self.add_months(1)

    def sub_month(self) -> "Moment":
        return self.sub_months(1)

    add_months_no_overflow = add_months

    def add_years(self, value: int = 1) -> "Moment":
        y, m, d = self._components_of(self._dt)
        new_year = y + int(value)
        return self.set_date(new_year, m, min(d, self._engine.days_in_month(m, new_year)))

    def sub_years(self, value: int = 1) -> "Moment":
        return self.add_years(-int(value))

    def add_year(self) -> "Moment":
        return self.add_years(1)

    def sub_year(self) -> "Moment":
        return self.sub_years(1)

    def _shift_wall(self, delta: timedelta) -> "Moment":
        try:
            self._dt = self._dt + delta
        except OverflowError as e:
            raise ValidationError(str(e)) from None
        return self

    def _shift_elapsed(self, delta: timedelta) -> "Moment":
        try:
            utc = self._dt.astimezone(timezone.utc) + delta
        except OverflowError as e:
            raise ValidationError(str(e)) from None
        self._dt = utc.astimezone(self._dt.tzinfo)
        return self

    def add_days(self, value: int = 1) -> "Moment":
        return self._shift_wall(timedelta(days=value))

    def sub_days(self, value: int = 1) -> "Moment":
        return self.add_days(-value)

    def add_weeks(self, value: int = 1) -> "Moment":
        return self._shift_wall(timedelta(weeks=value))

    def sub_weeks(self, value: int = 1) -> "Moment":
        return self.add_weeks(-value)

    def add_hours(self, value: float = 1) -> "Moment":
        return self._shift_elapsed(timedelta(hours=value))

    def sub_hours(self, value: float = 1) -> "Moment":
        return self.add_hours(-value)

    def add_minutes(self, value: float = 1) -> "Moment":
        return self._shift_elapsed(timedelta(minutes=value))

    def sub_minutes(self, value: float = 1) -> "Moment":
        return self.add_minutes(-value)

    def add_seconds(self, value: float = 1) -> "Moment":
        return self._shift_elapsed(timedelta(seconds=value))

    def sub_seconds(self, value: float = 1) -> "Moment":
        return self.add_seconds(-value)

    def add_weekdays(self, value: int = 1) -> "Moment":
        """Step whole days, counting only days outside the calendar's weekend."""
        step = 1 if value > 0 else -1
        counted = 0
        while counted < abs(int(value)):
            self.add_days(step)
            if not self.is_weekend():
                counted += 1
        return self

    def sub_weekdays(self, value: int = 1) -> "Moment":
        return self.add_weekdays(-int(value))

    # ------------------------------------------------------------------
    # period boundaries
    # ------------------------------------------------------------------

    def start_of_day(self) -> "Moment":
        return self._replace(hour=0, minute=0, second=0, microsecond=0)

    def end_of_day(self) -> "Moment":
        return self._replace(hour=23, minute=59, second=59, microsecond=999999)

    def start_of_month(self) -> "Moment":
        y, m, _ = self._components_of(self._dt)
        return self.set_date(y, m, 1).start_of_day()

    def end_of_month(self) -> "Moment":
        y, m, _ = self._components_of(self._dt)
        return self.set_date(y, m, self._engine.days_in_month(m, y)).end_of_day()

    def start_of_year(self) -> "Moment":
        return self.set_date(self.year, 1, 1).start_of_day()

    def end_of_year(self) -> "Moment":
        y = self.year
        return self.set_date(y, 12, self._engine.days_in_month(12, y)).end_of_day()

    def start_of_week(self, week_starts_at: Optional[int] = None) -> "Moment":
        """
        Back up to the first day of the week, at 00:00.

        `week_starts_at` is a weekday index in the active calendar's convention
        (see `day_of_week`); it defaults to Saturday for Jalali and Hijri and
        Monday for Gregorian.
        """
        start = WEEK_STARTS_AT[self._calendar] if week_starts_at is None else week_starts_at
        return self.sub_days((self.day_of_week - start + 7) % 7).start_of_day()

    def end_of_week(self, week_ends_at: Optional[int] = None) -> "Moment":
        end = WEEK_ENDS_AT[self._calendar] if week_ends_at is None else week_ends_at
        return self.add_days((end - self.day_of_week + 7) % 7).end_of_day()

    # ------------------------------------------------------------------
    # comparison
    # ------------------------------------------------------------------

    def _other(self, other: Any) -> "Moment":
        if isinstance(other, Moment):
            return other
        return Moment(other, self._calendar, None if other is None else self._dt.tzinfo)

    def is_same_day(self, other: Any = None) -> bool:
        return self._components_of(self._dt) == self._components_of(self._other(other).datetime)

    def is_same_month(self, other: Any = None, of_same_year: bool = True) -> bool:
        y1, m1, _ = self._components_of(self._dt)
        y2, m2, _ = self._components_of(self._other(other).datetime)
        return m1 == m2 and (not of_same_year or y1 == y2)

    def is_same_year(self, other: Any = None) -> bool:
        return self._components_of(self._dt)[0] == self._components_of(self._other(other).datetime)[0]

    def _cmp_target(self, other: Any) -> Optional[datetime]:
        if other is None:
            return None
        try:
            return self._other(other).datetime
        except (TypeError, ValueError):
            return None

    def __eq__(self, other: Any) -> bool:
        target = self._cmp_target(other)
        return NotImplemented if target is None else self._dt == target

    def __lt__(self, other: Any) -> bool:
        target = self._cmp_target(other)
        return NotImplemented if target is None else self._dt < target

    def __le__(self, other: Any) -> bool:
        target = self._cmp_target(other)
        return NotImplemented if target is None else self._dt <= target

    def __gt__(self, other: Any) -> bool:
        target = self._cmp_target(other)
        return NotImplemented if target is None else self._dt > target

    def __ge__(self, other: Any) -> bool:
        target = self._cmp_target(other)
        return NotImplemented if target is None else self._dt >= target

    __hash__ = None  # mutable

    def is_between(self, a: Any, b: Any, inclusive: bool = True) -> bool:
        lo, hi = sorted((self._other(a).datetime, self._other(b).datetime))
        if inclusive:
            return lo <= self._dt <= hi
        return lo < self._dt < hi

    def is_past(self) -> bool:
        return self._dt < config.now(self._dt.tzinfo)

    def is_future(self) -> bool:
        return self._dt > config.now(self._dt.tzinfo)

    def _is_offset_day(self, days: int) -> bool:
        target = Moment(None, self._calendar, self._dt.tzinfo).add_days(days)
        return self.is_same_day(target)

    def is_today(self) -> bool:
        return self._is_offset_day(0)

    def is_yesterday(self) -> bool:
        return self._is_offset_day(-1)

    def is_tomorrow(self) -> bool:
        return self._is_offset_day(1)

    def is_weekend(self) -> bool:
        return self.day_of_week in WEEKEND_DAYS[self._calendar]

    # ------------------------------------------------------------------
    # differences
    # ------------------------------------------------------------------

    def diff_in_seconds(self, other: Any = None, absolute: bool = True) -> int:
        """Whole seconds of ``self - other``."""
        diff = self.int_timestamp - self._other(other).int_timestamp
        return abs(diff) if absolute else diff

    def _diff_units(self, other: Any, unit_seconds: int, absolute: bool) -> int:
        diff = self.diff_in_seconds(other, absolute=False)
        count = abs(diff) // unit_seconds
        return count if absolute or diff >= 0 else -count

    def diff_in_days(self, other: Any = None, absolute: bool = True) -> int:
        return self._diff_units(other, DAY, absolute)

    def diff_in_months(self, other: Any = None, absolute: bool = True) -> int:
        """Approximate: counts 30-day months."""
        return self._diff_units(other, MONTH, absolute)

    def diff_in_years(self, other: Any = None, absolute: bool = True) -> int:
        """Approximate: counts 365-day years."""
        return self._diff_units(other, YEAR, absolute)

    def relative_time(self, reference: Any = None) -> str:
        """Phrase such as "3 ساعت پیش" in the active calendar's language."""
        delta = self._other(reference).int_timestamp - self.int_timestamp
        return describe(delta, self._calendar)

    diff_for_humans = relative_time

    def ago(self) -> str:
        return self.relative_time()

    # ------------------------------------------------------------------
    # output
    # ------------------------------------------------------------------

    def format(self, template: Optional[str] = None, options: Optional[FormatOptions] = None) -> str:
        return format_datetime_as(self._dt, self._engine, template, options)

    def to_date_string(self) -> str:
        return self.format("Y-m-d")

    def to_datetime_string(self) -> str:
        return self.format("Y-m-d H:i:s")

    def to_time_string(self) -> str:
        return self.format("H:i:s")

    def to_formatted_date_string(self) -> str:
        return self.format("M j, Y")

    def to_day_datetime_string(self) -> str:
        return self.format("D, M j, Y g:i A")

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return f"Moment('{self._dt.isoformat()}', calendar='{self._calendar.value}')"
