from __future__ import annotations

import logging
import re
from typing import Dict, List, Optional, Tuple

from . import config
from .core.engine import CalendarEngine
from .core.errors import ParseError
from .locales.base import LocaleTable, normalize_digits
from .locales.registry import get_locale

logger = logging.getLogger(__name__)

ESCAPE = "\\"

_NUMERIC = {
    "Y": ("year", r"(\d{1,4})"),
    "y": ("year2", r"(\d{2})"),
    "m": ("month", r"(\d{1,2})"),
    "n": ("month", r"(\d{1,2})"),
    "d": ("day", r"(\d{1,2})"),
    "j": ("day", r"(\d{1,2})"),
    "H": ("hour", r"(\d{1,2})"),
    "G": ("hour", r"(\d{1,2})"),
    "h": ("hour12", r"(\d{1,2})"),
    "g": ("hour12", r"(\d{1,2})"),
    "i": ("minute", r"(\d{2})"),
    "s": ("second", r"(\d{2})"),
}

DEFAULTS = {"year": 1, "month": 1, "day": 1, "hour": 0, "minute": 0, "second": 0}


def _alternation(words) -> str:
    uniq = sorted({normalize_digits(w) for w in words if w}, key=len, reverse=True)
    return "(" + "|".join(re.escape(w) for w in uniq) + ")"


def _meridiem_words(locale: LocaleTable) -> Dict[str, bool]:
    """Accepted meridiem spellings mapped to is_pm."""
    words = {"AM": False, "am": False, "PM": True, "pm": True}
    for short in (False, True):
        words[locale.meridiem(False, short)] = False
        words[locale.meridiem(True, short)] = True
    words.pop("", None)
    return words


def compile_template(template: str, locale: LocaleTable) -> Tuple[re.Pattern, List[str]]:
    """Regex for `template` plus the field name captured by each group."""
    parts: List[str] = []
    fields: List[str] = []
    i, n = 0, len(template)
    while i < n:
        ch = template[i]
        i += 1
        if ch == ESCAPE:
            if i < n:
                parts.append(re.escape(template[i]))
                i += 1
            continue
        if ch in _NUMERIC:
            name, pattern = _NUMERIC[ch]
            parts.append(pattern)
            fields.append(name)
        elif ch == "F":
            parts.append(_alternation(locale.months))
            fields.append("month_name")
        elif ch == "M":
            parts.append(_alternation(locale.months_short + locale.months))
            fields.append("month_name")
        elif ch in ("A", "a"):
            parts.append(_alternation(_meridiem_words(locale)))
            fields.append("meridiem")
        else:
            parts.append(re.escape(ch))
    return re.compile("^" + "".join(parts) + "$"), fields


def _month_number(locale: LocaleTable, word: str) -> int:
    for names in (locale.months, locale.months_short):
        normalized = [normalize_digits(x) for x in names]
        if word in normalized:
            return normalized.index(word) + 1
    raise ParseError(f"Unknown month name '{word}'")


def _expand_two_digit_year(yy: int, engine: CalendarEngine) -> int:
    today = config.now().date()
    current, _, _ = engine.from_gregorian(today.year, today.month, today.day)
    return (current // 100) * 100 + yy


def parse_components(
    template: str,
    text: str,
    engine: CalendarEngine,
    locale: Optional[LocaleTable] = None,
) -> Dict[str, int]:
    """
    Read calendar components out of `text` laid out as `template`.

    Native digits are accepted. Fields the template does not mention take
    their defaults: year, month and day 1, time of day 0. Raises ParseError
    when `text` does not match.
    """
    locale = locale if locale is not None else get_locale(engine.id)
    pattern, fields = compile_template(template, locale)
    match = pattern.match(normalize_digits(text.strip()))
    if match is None:
        logger.debug("Template %r did not match %r for %s", template, text, engine.id.value)
        raise ParseError(f"Could not parse '{text}' with format '{template}'")

    out = dict(DEFAULTS)
    hour12: Optional[int] = None
    is_pm: Optional[bool] = None
    for name, raw in zip(fields, match.groups()):
        if name == "month_name":
            out["month"] = _month_number(locale, raw)
        elif name == "meridiem":
            is_pm = _meridiem_words(locale)[raw]
        elif name == "hour12":
            hour12 = int(raw)
        elif name == "year2":
            out["year"] = _expand_two_digit_year(int(raw), engine)
        else:
            out[name] = int(raw)

    if hour12 is not None:
        # without a meridiem the 12-hour value is kept as written
        out["hour"] = hour12 if is_pm is None else hour12 % 12 + (12 if is_pm else 0)
    elif is_pm and out["hour"] < 12:
        out["hour"] += 12
    return out
