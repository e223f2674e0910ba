"""multical public API.

Keep this surface small: users should mostly interact with Moment and the
functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    calendar_info,
    get_engine,
    register_engine,
    from_gregorian,
    to_gregorian,
    is_leap_year,
    days_in_month,
    days_in_year,
    is_valid_date,
    month_bounds,
    first_day_of_month,
    last_day_of_month,
    new_year_day,
    make_moment,
    jdate,
    hdate,
)
from .core.errors import MulticalError, ParseError, ValidationError
from .core.types import CalendarDate, CalendarId, DigitStyle, FormatOptions
from .moment import Moment

__all__ = [
    "list_calendars",
    "calendar_info",
    "get_engine",
    "register_engine",
    "from_gregorian",
    "to_gregorian",
    "is_leap_year",
    "days_in_month",
    "days_in_year",
    "is_valid_date",
    "month_bounds",
    "first_day_of_month",
    "last_day_of_month",
    "new_year_day",
    "make_moment",
    "jdate",
    "hdate",
    "Moment",
    "MulticalError",
    "ParseError",
    "ValidationError",
    "CalendarDate",
    "CalendarId",
    "DigitStyle",
    "FormatOptions",
]
