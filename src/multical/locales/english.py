"""English text for the Gregorian calendar."""

from __future__ import annotations

from .base import table_from_lists

MONTHS = {
    1: "January", 2: "February", 3: "March", 4: "April", 5: "May", 6: "June",
    7: "July", 8: "August", 9: "September", 10: "October", 11: "November", 12: "December",
}
MONTHS_SHORT = {i: name[:3] for i, name in MONTHS.items()}

WEEKDAYS = {
    0: "Sunday", 1: "Monday", 2: "Tuesday", 3: "Wednesday",
    4: "Thursday", 5: "Friday", 6: "Saturday",
}
WEEKDAYS_SHORT = {i: name[:3] for i, name in WEEKDAYS.items()}

MERIDIEM = {"AM": "AM", "PM": "PM", "AM_SHORT": "am", "PM_SHORT": "pm"}

UNITS = {
    "year": ("year", "years"),
    "month": ("month", "months"),
    "week": ("week", "weeks"),
    "day": ("day", "days"),
    "hour": ("hour", "hours"),
    "minute": ("minute", "minutes"),
    "second": ("second", "seconds"),
}


def english_ordinal(day: int) -> str:
    if 11 <= day % 100 <= 13:
        return "th"
    return {1: "st", 2: "nd", 3: "rd"}.get(day % 10, "th")


ENGLISH = table_from_lists(
    "en",
    MONTHS,
    MONTHS_SHORT,
    WEEKDAYS,
    WEEKDAYS_SHORT,
    meridiem_words=MERIDIEM,
    units=UNITS,
    ago="ago",
    from_now="from now",
    just_now="just now",
    phrase_order="value-first",
    plural_after=1,
    ordinal_fn=english_ordinal,
)
