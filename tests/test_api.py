# tests/test_api.py

from datetime import date

import pytest

import multical
from multical import api
from multical.bootstrap import build_registry
from multical.core.errors import ValidationError
from multical.core.types import CalendarDate, CalendarId


@pytest.fixture
def fresh_registry(monkeypatch):
    """Give the test its own registry so registrations do not leak."""
    monkeypatch.setattr(api, "_registry", build_registry())


def test_list_and_info():
    assert multical.list_calendars() == ["gregorian", "hijri", "jalali"]
    info = multical.calendar_info("jalali")
    assert info["id"] == "jalali"
    assert info["leap_cycle_years"] == 33
    assert multical.calendar_info(CalendarId.HIJRI)["kind"] == "lunar"
    assert multical.get_engine("gregorian").id is CalendarId.GREGORIAN


def test_unknown_calendar():
    with pytest.raises(KeyError):
        multical.get_engine("julian")
    with pytest.raises(KeyError):
        multical.calendar_info("julian")


def test_conversion():
    assert multical.from_gregorian(date(2025, 3, 21)) == CalendarDate(CalendarId.JALALI, 1404, 1, 1)
    assert multical.from_gregorian(date(2025, 3, 21), calendar="hijri") == CalendarDate(CalendarId.HIJRI, 1446, 9, 21)
    assert multical.to_gregorian(CalendarDate(CalendarId.JALALI, 1403, 12, 30)) == date(2025, 3, 20)
    assert multical.to_gregorian(CalendarDate(CalendarId.HIJRI, 1447, 1, 1)) == date(2025, 6, 27)
    with pytest.raises(ValidationError):
        multical.to_gregorian(CalendarDate(CalendarId.JALALI, 1404, 12, 30))
    with pytest.raises(ValidationError):
        multical.to_gregorian(CalendarDate(CalendarId.HIJRI, 1446, 13, 1))


def test_rules():
    assert multical.is_leap_year(1403)
    assert not multical.is_leap_year(1404)
    assert multical.is_leap_year(1445, calendar="hijri")
    assert multical.is_leap_year(2024, calendar="gregorian")
    assert multical.days_in_month(1404, 12) == 29
    assert multical.days_in_month(1403, 12) == 30
    assert multical.days_in_month(1446, 2, calendar="hijri") == 29
    assert multical.days_in_year(1403) == 366
    assert multical.days_in_year(1446, calendar="hijri") == 354
    assert not multical.is_valid_date(1404, 12, 30)
    assert multical.is_valid_date(1403, 12, 30)
    assert not multical.is_valid_date(1404, 0, 1)


def test_month_bounds():
    b = multical.month_bounds(1404, 1)
    assert b == {
        "Y": 1404,
        "M": 1,
        "calendar": "jalali",
        "days": 31,
        "first_date": date(2025, 3, 21),
        "last_date": date(2025, 4, 20),
    }
    assert multical.first_day_of_month(1446, 9, calendar="hijri") == date(2025, 3, 1)
    assert multical.last_day_of_month(1446, 9, calendar="hijri") == date(2025, 3, 30)
    with pytest.raises(ValidationError):
        multical.month_bounds(1404, 13)


def test_new_year_day():
    assert multical.new_year_day(1404) == {
        "Y": 1404,
        "calendar": "jalali",
        "date": date(2025, 3, 21),
        "leap": False,
        "days": 365,
    }
    h = multical.new_year_day(1447, calendar="hijri")
    assert h["date"] == date(2025, 6, 27)


def test_register_engine(fresh_registry):
    jalali = multical.get_engine("jalali")
    with pytest.raises(KeyError):
        multical.register_engine("jalali", jalali)

    multical.register_engine("persian", jalali)
    assert "persian" in multical.list_calendars()
    assert multical.get_engine("persian") is jalali


def test_register_engine_overwrite(fresh_registry, caplog):
    hijri = multical.get_engine("hijri")
    with caplog.at_level("INFO", logger="multical.core.engine"):
        multical.register_engine("jalali", hijri, overwrite=True)
    assert multical.get_engine("jalali") is hijri
    assert "Replacing calendar engine 'jalali'" in caplog.text


def test_registry_restored_after_overwrite():
    assert multical.get_engine("jalali").id is CalendarId.JALALI


def test_jdate_and_hdate():
    assert multical.jdate("Y/m/d", date(2025, 3, 21)) == "1404/01/01"
    assert multical.hdate("Y/m/d", "2025-03-21") == "1446/09/21"
    m = multical.jdate(value=date(2025, 3, 21))
    assert isinstance(m, multical.Moment)
    assert m.is_jalali()
    assert multical.hdate(value=date(2025, 3, 21)).is_hijri()
    assert multical.make_moment(date(2025, 3, 21), "gregorian").year == 2025
    assert callable(multical.make_moment)


def test_jdate_defaults_to_now(monkeypatch):
    monkeypatch.setenv("MULTICAL_TEST_TIME", "2025-03-21T12:00:00+00:00")
    assert multical.jdate("Y/m/d H:i") == "1404/01/01 12:00"
    assert multical.hdate().day == 21
