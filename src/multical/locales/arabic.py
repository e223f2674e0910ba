"""Arabic text for the Hijri calendar."""

from __future__ import annotations

from .base import ARABIC_DIGITS, table_from_lists

MONTHS = {
    1: "محرم",
    2: "صفر",
    3: "ربيع الأول",
    4: "ربيع الآخر",
    5: "جمادى الأولى",
    6: "جمادى الآخرة",
    7: "رجب",
    8: "شعبان",
    9: "رمضان",
    10: "شوال",
    11: "ذو القعدة",
    12: "ذو الحجة",
}

MONTHS_SHORT = {
    1: "محر",
    2: "صفر",
    3: "رب١",
    4: "رب٢",
    5: "جم١",
    6: "جم٢",
    7: "رجب",
    8: "شعب",
    9: "رمض",
    10: "شوا",
    11: "ذوق",
    12: "ذوح",
}

# 0=Sunday
WEEKDAYS = {
    0: "الأحد",
    1: "الاثنين",
    2: "الثلاثاء",
    3: "الأربعاء",
    4: "الخميس",
    5: "الجمعة",
    6: "السبت",
}

WEEKDAYS_SHORT = {0: "أح", 1: "اث", 2: "ثل", 3: "أر", 4: "خم", 5: "جم", 6: "سب"}

MERIDIEM = {
    "AM": "صباحاً",
    "PM": "مساءً",
    "AM_SHORT": "ص",
    "PM_SHORT": "م",
}

UNITS = {
    "year": ("سنة", "سنوات"),
    "month": ("شهر", "أشهر"),
    "week": ("أسبوع", "أسابيع"),
    "day": ("يوم", "أيام"),
    "hour": ("ساعة", "ساعات"),
    "minute": ("دقيقة", "دقائق"),
    "second": ("ثانية", "ثوانٍ"),
}

ARABIC = table_from_lists(
    "ar",
    MONTHS,
    MONTHS_SHORT,
    WEEKDAYS,
    WEEKDAYS_SHORT,
    meridiem_words=MERIDIEM,
    digits=ARABIC_DIGITS,
    ordinal="",
    units=UNITS,
    ago="منذ",
    from_now="بعد",
    just_now="الآن",
    phrase_order="direction-first",
    plural_after=2,
)
