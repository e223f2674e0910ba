from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, Literal, Mapping, Optional, Tuple

from ..core.types import DigitStyle

LATIN_DIGITS = "0123456789"
FARSI_DIGITS = "۰۱۲۳۴۵۶۷۸۹"
ARABIC_DIGITS = "٠١٢٣٤٥٦٧٨٩"

UNITS = ("second", "minute", "hour", "day", "week", "month", "year")

_TO_NATIVE = {
    DigitStyle.FARSI: str.maketrans(LATIN_DIGITS, FARSI_DIGITS),
    DigitStyle.ARABIC: str.maketrans(LATIN_DIGITS, ARABIC_DIGITS),
}
_TO_LATIN = str.maketrans(FARSI_DIGITS + ARABIC_DIGITS, LATIN_DIGITS * 2)


def apply_digits(text: str, style: DigitStyle) -> str:
    """Substitute Latin digits with the glyphs of `style` (LATIN passes through)."""
    table = _TO_NATIVE.get(DigitStyle.coerce(style))
    return text.translate(table) if table is not None else text


def normalize_digits(text: str) -> str:
    """Map both native digit scripts back to Latin digits."""
    return text.translate(_TO_LATIN)


@dataclass(frozen=True)
class LocaleTable:
    """
    Static text for one calendar.

    Weekday tuples are indexed by the Gregorian weekday with 0=Sunday, the
    same index the moment reads from its datetime before any week remap.
    """
    name: str
    months: Tuple[str, ...]
    months_short: Tuple[str, ...]
    weekdays: Tuple[str, ...]
    weekdays_short: Tuple[str, ...]
    meridiem_words: Mapping[str, str]
    digits: str = LATIN_DIGITS
    ordinal: str = ""
    units: Mapping[str, Tuple[str, str]] = field(default_factory=dict)
    ago: str = ""
    from_now: str = ""
    just_now: str = ""
    # "value-first": "3 hours ago"; "direction-first": "منذ 3 ساعات"
    phrase_order: Literal["value-first", "direction-first"] = "value-first"
    # singular word used for values <= plural_after
    plural_after: int = 1
    ordinal_fn: Optional[Callable[[int], str]] = None

    def month_name(self, month: int) -> str:
        return self.months[month - 1] if 1 <= month <= len(self.months) else ""

    def month_name_short(self, month: int) -> str:
        return self.months_short[month - 1] if 1 <= month <= len(self.months_short) else ""

    def weekday_name(self, weekday: int) -> str:
        return self.weekdays[weekday] if 0 <= weekday < len(self.weekdays) else ""

    def weekday_name_short(self, weekday: int) -> str:
        return self.weekdays_short[weekday] if 0 <= weekday < len(self.weekdays_short) else ""

    def meridiem(self, is_pm: bool, short: bool = False) -> str:
        key = ("PM" if is_pm else "AM") + ("_SHORT" if short else "")
        return self.meridiem_words.get(key, "")

    def ordinal_suffix(self, day: int = 0) -> str:
        if self.ordinal_fn is not None:
            return self.ordinal_fn(day)
        return self.ordinal

    def to_native_digits(self, text: str) -> str:
        return text.translate(str.maketrans(LATIN_DIGITS, self.digits))

    def to_latin_digits(self, text: str) -> str:
        return text.translate(str.maketrans(self.digits, LATIN_DIGITS))

    def unit_word(self, unit: str, value: int) -> str:
        forms = self.units.get(unit)
        if forms is None:
            return ""
        return forms[0] if abs(value) <= self.plural_after else forms[1]

    def relative_time(self, unit: str, value: int, is_past: bool) -> str:
        if value == 0 and unit == "second" and self.just_now:
            return self.just_now
        word = self.unit_word(unit, value) or unit
        direction = self.ago if is_past else self.from_now
        if self.phrase_order == "direction-first":
            return f"{direction} {value} {word}"
        return f"{value} {word} {direction}"


def table_from_lists(
    name: str,
    months: Dict[int, str],
    months_short: Dict[int, str],
    weekdays: Dict[int, str],
    weekdays_short: Dict[int, str],
    **kwargs,
) -> LocaleTable:
    """Build a LocaleTable from 1-based month maps and 0=Sunday weekday maps."""
    return LocaleTable(
        name=name,
        months=tuple(months[i] for i in range(1, 13)),
        months_short=tuple(months_short[i] for i in range(1, 13)),
        weekdays=tuple(weekdays[i] for i in range(7)),
        weekdays_short=tuple(weekdays_short[i] for i in range(7)),
        **kwargs,
    )
