# tests/test_moment.py

import copy
from datetime import date, datetime, timezone

import pytest

from multical import Moment
from multical.core.errors import ParseError, ValidationError
from multical.core.types import CalendarDate, CalendarId


@pytest.fixture
def pinned_now(monkeypatch):
    """Freeze the library clock at 2025-03-21 12:00 UTC (1404/01/01, a Friday)."""
    monkeypatch.setenv("MULTICAL_TEST_TIME", "2025-03-21T12:00:00+00:00")


def ymd(m: Moment):
    return m.components().as_tuple()


# --- construction -------------------------------------------------------

def test_wraps_many_inputs():
    expected = datetime(2025, 3, 21, tzinfo=timezone.utc)
    assert Moment(date(2025, 3, 21)).datetime == expected
    assert Moment(datetime(2025, 3, 21)).datetime == expected
    assert Moment("2025-03-21").datetime == expected
    assert Moment("2025-03-21T00:00:00Z").datetime == expected
    assert Moment(expected.timestamp()).datetime == expected
    assert Moment(Moment(expected, calendar="hijri")).datetime == expected
    assert Moment(expected).calendar is CalendarId.JALALI


def test_bad_inputs():
    with pytest.raises(ParseError):
        Moment("21st of March")
    with pytest.raises(TypeError):
        Moment([2025, 3, 21])
    with pytest.raises(ValueError):
        Moment(date(2025, 3, 21), calendar="julian")


def test_create_from_components():
    m = Moment.create_jalali(1404, 1, 1, 10, 30, 15)
    assert m.to_date() == date(2025, 3, 21)
    assert (m.hour, m.minute, m.second) == (10, 30, 15)
    assert Moment.create_hijri(1446, 1, 1).to_date() == date(2024, 7, 8)
    assert Moment.create_gregorian(2025, 3, 21).components() == CalendarDate(CalendarId.GREGORIAN, 2025, 3, 21)
    with pytest.raises(ValidationError):
        Moment.create_jalali(1404, 12, 30)
    with pytest.raises(ValidationError):
        Moment.create_jalali(1404, 1, 1, 24)


def test_create_fills_missing_fields_from_today(pinned_now):
    assert ymd(Moment.create_jalali(day=15)) == (1404, 1, 15)
    assert ymd(Moment.create(month=2, calendar="hijri")) == (1446, 2, 21)
    m = Moment.create_from_date(1404, 2, 1)
    assert ymd(m) == (1404, 2, 1)
    assert m.hour == 12


def test_now_uses_configured_clock(pinned_now):
    m = Moment()
    assert ymd(m) == (1404, 1, 1)
    assert ymd(Moment.now("hijri")) == (1446, 9, 21)


def test_parse_format():
    assert Moment.parse_format("Y/m/d", "1404/01/15").to_date() == date(2025, 4, 4)
    assert Moment.parse_format("Y/m/d", "۱۴۰۴/۰۱/۱۵").to_date() == date(2025, 4, 4)
    m = Moment.parse_format("d F Y H:i", "21 رمضان 1446 18:45", calendar="hijri")
    assert m.to_date() == date(2025, 3, 21)
    assert (m.hour, m.minute) == (18, 45)
    assert m.is_hijri()
    assert ymd(Moment.parse_format("Y/m", "1404/02")) == (1404, 2, 1)
    with pytest.raises(ParseError):
        Moment.parse_format("Y/m/d", "1404-01-15")
    with pytest.raises(ValidationError):
        Moment.parse_format("Y/m/d", "1404/12/30")


# --- calendar switching -------------------------------------------------

def test_switching_calendar_keeps_instant():
    m = Moment("2025-03-21T12:00:00+00:00")
    before_ts = m.timestamp()
    before = m.components()

    assert m.use_hijri() is m
    assert ymd(m) == (1446, 9, 21)
    m.use_gregorian()
    assert ymd(m) == (2025, 3, 21)
    m.use_jalali()

    assert m.components() == before
    assert m.timestamp() == before_ts
    assert m.is_jalali() and not m.is_hijri() and not m.is_gregorian()


def test_copy_is_independent():
    m = Moment.create_jalali(1404, 1, 1).use_hijri()
    c = m.copy()
    c.add_days(1)
    assert m.to_date() == date(2025, 3, 21)
    assert c.to_date() == date(2025, 3, 22)
    assert copy.copy(m).calendar is CalendarId.HIJRI


# --- reads ---------------------------------------------------------------

def test_reads():
    m = Moment("2025-03-21T14:05:09.250000+00:00")
    assert (m.year, m.month, m.day) == (1404, 1, 1)
    assert (m.hour, m.minute, m.second, m.microsecond) == (14, 5, 9, 250000)
    assert m.int_timestamp == 1742565909
    assert m.day_of_week == 6
    assert m.gregorian_weekday == 5
    assert m.days_in_month == 31
    assert m.days_in_year == 365
    assert m.day_of_year == 1
    assert m.quarter == 1
    assert m.week_of_month == 1
    assert m.week_of_year == 1
    assert not m.is_leap_year()
    assert m.month_name == "فروردین"
    assert m.day_name == "جمعه"
    assert m.day_name_short == "ج"
    assert m.to_dict() == {"year": 1404, "month": 1, "day": 1, "hour": 14, "minute": 5, "second": 9}
    assert m.to_tuple() == (1404, 1, 1, 14, 5, 9)
    assert m.timezone_name == "UTC"


def test_reads_in_other_calendars():
    m = Moment(date(2025, 3, 21), calendar="hijri")
    assert m.month_name == "رمضان"
    assert m.day_of_week == 6
    assert m.days_in_month == 30
    assert m.quarter == 3
    assert m.week_of_month == 3

    g = Moment(date(2025, 3, 21), calendar="gregorian")
    assert g.day_of_week == 5
    assert g.day_name == "Friday"
    assert g.day_of_year == 80
    assert g.week_of_year == 12


# --- writes --------------------------------------------------------------

def test_set_date_keeps_time_of_day():
    m = Moment("2025-03-21T10:20:30+00:00")
    m.set_date(1403, 12, 30)
    assert m.to_date() == date(2025, 3, 20)
    assert (m.hour, m.minute, m.second) == (10, 20, 30)


def test_failed_write_leaves_moment_untouched():
    m = Moment.create_jalali(1404, 1, 1)
    before = m.timestamp()
    with pytest.raises(ValidationError):
        m.set_date(1404, 12, 30)
    with pytest.raises(ValidationError):
        m.set_month(13)
    with pytest.raises(ValidationError):
        m.set_time(12, 60)
    assert m.timestamp() == before


def test_single_field_setters():
    m = Moment.create_jalali(1404, 5, 10)
    assert ymd(m.set_year(1403)) == (1403, 5, 10)
    assert ymd(m.set_month(7)) == (1403, 7, 10)
    assert ymd(m.set_day(30)) == (1403, 7, 30)
    m.set_time(23, 59, 58, 7)
    assert (m.hour, m.minute, m.second, m.microsecond) == (23, 59, 58, 7)
    m.set_date_time(1404, 1, 1, 8, 0)
    assert m.datetime == datetime(2025, 3, 21, 8, 0, tzinfo=timezone.utc)


def test_timestamp_and_timezone():
    m = Moment(date(2025, 3, 21))
    m.set_timezone("Asia/Tehran")
    assert m.hour == 3 and m.minute == 30
    assert m.timestamp() == datetime(2025, 3, 21, tzinfo=timezone.utc).timestamp()
    m.set_timestamp(0)
    assert m.to_date() == date(1970, 1, 1)
    assert m.timezone_name == "Asia/Tehran"


# --- arithmetic ----------------------------------------------------------

def test_add_months_clamps_day():
    assert ymd(Moment.create_jalali(1403, 6, 31).add_months(1)) == (1403, 7, 30)
    assert ymd(Moment.create_jalali(1404, 1, 15).sub_months(1)) == (1403, 12, 15)
    assert ymd(Moment.create_jalali(1403, 11, 30).add_months(13)) == (1404, 12, 29)
    assert ymd(Moment.create_hijri(1446, 1, 30).add_month()) == (1446, 2, 29)
    assert ymd(Moment.create_gregorian(2024, 1, 31).add_months_no_overflow(1)) == (2024, 2, 29)
    assert ymd(Moment.create_jalali(1404, 3, 5).sub_month()) == (1404, 2, 5)


def test_add_years_clamps_day():
    assert ymd(Moment.create_jalali(1403, 12, 30).add_years(1)) == (1404, 12, 29)
    assert ymd(Moment.create_jalali(1403, 12, 30).add_year()) == (1404, 12, 29)
    assert ymd(Moment.create_hijri(1445, 12, 30).add_year()) == (1446, 12, 29)
    assert ymd(Moment.create_gregorian(2024, 2, 29).sub_year()) == (2023, 2, 28)
    assert ymd(Moment.create_jalali(1404, 5, 5).sub_years(4)) == (1400, 5, 5)


def test_month_arithmetic_keeps_time():
    m = Moment.create_jalali(1404, 1, 1, 10, 30, 15).add_months(1)
    assert (m.hour, m.minute, m.second) == (10, 30, 15)


def test_day_and_time_arithmetic():
    m = Moment("2025-03-21T12:00:00+00:00")
    assert m.copy().add_days(10).to_date() == date(2025, 3, 31)
    assert m.copy().sub_weeks(1).to_date() == date(2025, 3, 14)
    assert m.copy().add_hours(25).datetime == datetime(2025, 3, 22, 13, tzinfo=timezone.utc)
    assert m.copy().sub_minutes(90).datetime == datetime(2025, 3, 21, 10, 30, tzinfo=timezone.utc)
    assert m.copy().add_seconds(61).second == 1


def test_days_follow_wall_clock_and_hours_follow_elapsed_time():
    # US clocks spring forward on 2025-03-09
    m = Moment(datetime(2025, 3, 8, 12, 0), calendar="gregorian", tz="America/New_York")
    assert m.copy().add_days(1).hour == 12
    assert m.copy().add_hours(24).hour == 13


def test_add_weekdays_skips_weekend():
    # Thursday -> Saturday, Friday is the Jalali weekend
    m = Moment(date(2025, 3, 20)).add_weekdays(1)
    assert m.to_date() == date(2025, 3, 22)
    # Friday -> Monday for Gregorian
    g = Moment(date(2025, 3, 21), calendar="gregorian").add_weekdays(1)
    assert g.to_date() == date(2025, 3, 24)
    assert Moment(date(2025, 3, 22)).sub_weekdays(1).to_date() == date(2025, 3, 20)


# --- boundaries ----------------------------------------------------------

def test_month_and_year_boundaries():
    m = Moment("2025-03-25T15:45:00+00:00")  # 1404/01/05
    start = m.copy().start_of_month()
    assert start.to_date() == date(2025, 3, 21)
    assert (start.hour, start.minute, start.second) == (0, 0, 0)

    end = m.copy().end_of_month()
    assert end.to_date() == date(2025, 4, 20)
    assert (end.hour, end.minute, end.second, end.microsecond) == (23, 59, 59, 999999)

    assert m.copy().start_of_year().to_date() == date(2025, 3, 21)
    assert m.copy().end_of_year().to_date() == date(2026, 3, 20)

    h = Moment(date(2025, 3, 10), calendar="hijri")
    assert h.copy().end_of_month().to_date() == date(2025, 3, 30)
    assert h.copy().start_of_month().to_date() == date(2025, 3, 1)


def test_week_boundaries():
    m = Moment("2025-03-25T15:45:00+00:00")  # Tuesday
    assert m.copy().start_of_week().to_date() == date(2025, 3, 22)
    assert m.copy().end_of_week().to_date() == date(2025, 3, 28)

    g = m.copy().use_gregorian()
    assert g.copy().start_of_week().to_date() == date(2025, 3, 24)
    assert g.copy().end_of_week().to_date() == date(2025, 3, 30)
    # explicit start index in the calendar's own convention (Sunday = 0)
    assert g.copy().start_of_week(0).to_date() == date(2025, 3, 23)


def test_day_boundaries():
    m = Moment("2025-03-25T15:45:00+00:00")
    assert m.copy().start_of_day().datetime == datetime(2025, 3, 25, tzinfo=timezone.utc)
    assert m.copy().end_of_day().datetime == datetime(2025, 3, 25, 23, 59, 59, 999999, tzinfo=timezone.utc)


# --- comparison ----------------------------------------------------------

def test_instant_ordering():
    a = Moment("2025-03-21T00:00:00+00:00")
    b = Moment("2025-03-21T03:30:00+03:30", calendar="hijri")
    assert a == b
    assert a <= b and a >= b
    assert a < datetime(2025, 3, 21, 1, tzinfo=timezone.utc)
    assert a > "2025-03-20T23:00:00Z"
    assert a.is_between("2025-03-22", "2025-03-20")
    assert a.is_between(a, "2025-03-22")
    assert not a.is_between(a, "2025-03-22", inclusive=False)
    assert (a == object()) is False


def test_same_day_month_year_in_active_calendar():
    a = Moment(date(2025, 3, 21))
    assert a.is_same_day(Moment(date(2025, 3, 21), calendar="hijri"))
    assert a.is_same_month(date(2025, 4, 20))         # still Farvardin
    assert not a.is_same_month(date(2025, 4, 21))     # Ordibehesht
    assert not a.is_same_month(date(2026, 3, 25))
    assert a.is_same_month(date(2026, 3, 25), of_same_year=False)
    assert a.is_same_year(date(2026, 3, 20))          # 1404/12/29
    assert not a.is_same_year(date(2026, 3, 21))

    # Gregorian March, but Jalali months differ
    g = Moment(date(2025, 3, 20), calendar="gregorian")
    assert g.is_same_month(date(2025, 3, 21))
    assert not Moment(date(2025, 3, 20)).is_same_month(date(2025, 3, 21))


def test_relative_to_now(pinned_now):
    assert Moment(date(2025, 3, 21)).is_today()
    assert Moment(date(2025, 3, 20)).is_yesterday()
    assert Moment(date(2025, 3, 22)).is_tomorrow()
    assert Moment(date(2025, 3, 20)).is_past()
    assert Moment(date(2025, 3, 22)).is_future()


def test_weekend():
    assert Moment(date(2025, 3, 21)).is_weekend()
    assert not Moment(date(2025, 3, 22)).is_weekend()
    assert not Moment(date(2025, 3, 21), calendar="gregorian").is_weekend()
    assert Moment(date(2025, 3, 22), calendar="gregorian").is_weekend()
    assert Moment(date(2025, 3, 23), calendar="gregorian").is_weekend()


# --- differences ---------------------------------------------------------

def test_diffs():
    a = Moment("2025-03-21T00:00:00Z")
    b = a.copy().add_days(45)
    assert b.diff_in_seconds(a) == 45 * 86400
    assert b.diff_in_days(a) == 45
    assert a.diff_in_days(b) == 45
    assert a.diff_in_days(b, absolute=False) == -45
    assert b.diff_in_months(a) == 1
    assert b.diff_in_years(a) == 0
    assert a.copy().add_days(800).diff_in_years(a) == 2


def test_relative_time():
    ref = Moment("2025-03-21T12:00:00Z")
    m = Moment("2025-03-21T09:00:00Z")
    assert m.relative_time(ref) == "3 ساعت پیش"
    assert m.copy().use_hijri().diff_for_humans(ref) == "منذ 3 ساعات"
    assert m.copy().use_gregorian().relative_time(ref) == "3 hours ago"
    assert ref.relative_time(m) == "3 ساعت بعد"
    assert ref.relative_time(ref) == "همین الان"


def test_ago(pinned_now):
    assert Moment("2025-03-21T11:00:00Z").ago() == "1 ساعت پیش"
    assert Moment("2025-03-14T12:00:00Z", calendar="gregorian").ago() == "1 week ago"


# --- output --------------------------------------------------------------

def test_string_shortcuts():
    m = Moment("2025-03-21T14:05:09Z", calendar="gregorian")
    assert m.to_date_string() == "2025-03-21"
    assert m.to_datetime_string() == "2025-03-21 14:05:09"
    assert m.to_time_string() == "14:05:09"
    assert m.to_formatted_date_string() == "Mar 21, 2025"
    assert m.to_day_datetime_string() == "Fri, Mar 21, 2025 2:05 PM"
    assert str(m.use_jalali()) == "1404/01/01 14:05:09"
    assert repr(m) == "Moment('2025-03-21T14:05:09+00:00', calendar='jalali')"


def test_parse_format_accepts_calendar_names_in_any_case():
    assert Moment.parse_format("Y/m/d", "1404/01/15", calendar="Jalali").to_date() == date(2025, 4, 4)
    m = Moment.parse_format("Y/m/d", "1446/09/21", calendar="HIJRI")
    assert m.is_hijri()
    assert m.to_date() == date(2025, 3, 21)


def test_comparison_with_none_is_not_now(pinned_now):
    m = Moment("2025-03-21T12:00:00Z")
    assert (m == None) is False  # noqa: E711
    assert m != None  # noqa: E711
    with pytest.raises(TypeError):
        m < None
    with pytest.raises(TypeError):
        m >= None
