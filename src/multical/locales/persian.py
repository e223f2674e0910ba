"""Persian (Farsi) text for the Jalali calendar."""

from __future__ import annotations

from .base import FARSI_DIGITS, table_from_lists

MONTHS = {
    1: "فروردین",
    2: "اردیبهشت",
    3: "خرداد",
    4: "تیر",
    5: "مرداد",
    6: "شهریور",
    7: "مهر",
    8: "آبان",
    9: "آذر",
    10: "دی",
    11: "بهمن",
    12: "اسفند",
}

MONTHS_SHORT = {
    1: "فرو",
    2: "ارد",
    3: "خرد",
    4: "تیر",
    5: "مرد",
    6: "شهر",
    7: "مهر",
    8: "آبا",
    9: "آذر",
    10: "دی",
    11: "بهم",
    12: "اسف",
}

# 0=Sunday
WEEKDAYS = {
    0: "یکشنبه",
    1: "دوشنبه",
    2: "سه‌شنبه",
    3: "چهارشنبه",
    4: "پنجشنبه",
    5: "جمعه",
    6: "شنبه",
}

WEEKDAYS_SHORT = {0: "ی", 1: "د", 2: "س", 3: "چ", 4: "پ", 5: "ج", 6: "ش"}

MERIDIEM = {
    "AM": "قبل از ظهر",
    "PM": "بعد از ظهر",
    "AM_SHORT": "ق.ظ",
    "PM_SHORT": "ب.ظ",
}

# Persian counts take the singular noun
UNITS = {
    "year": ("سال", "سال"),
    "month": ("ماه", "ماه"),
    "week": ("هفته", "هفته"),
    "day": ("روز", "روز"),
    "hour": ("ساعت", "ساعت"),
    "minute": ("دقیقه", "دقیقه"),
    "second": ("ثانیه", "ثانیه"),
}

PERSIAN = table_from_lists(
    "fa",
    MONTHS,
    MONTHS_SHORT,
    WEEKDAYS,
    WEEKDAYS_SHORT,
    meridiem_words=MERIDIEM,
    digits=FARSI_DIGITS,
    ordinal="ام",
    units=UNITS,
    ago="پیش",
    from_now="بعد",
    just_now="همین الان",
    phrase_order="value-first",
)
