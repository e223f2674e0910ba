from __future__ import annotations

from typing import Tuple, Union

from .core.types import CalendarId
from .locales.registry import get_locale

MINUTE = 60
HOUR = 3600
DAY = 86400
WEEK = 604800
MONTH = 2592000   # 30 days
YEAR = 31536000   # 365 days

# (upper bound exclusive, unit, divisor)
_STEPS = (
    (MINUTE, "second", 1),
    (HOUR, "minute", MINUTE),
    (DAY, "hour", HOUR),
    (WEEK, "day", DAY),
    (MONTH, "week", WEEK),
    (YEAR, "month", MONTH),
)


def resolve_unit(seconds: int) -> Tuple[str, int]:
    """Largest unit whose threshold `seconds` reaches, with the truncated count."""
    seconds = abs(int(seconds))
    for bound, unit, divisor in _STEPS:
        if seconds < bound:
            return unit, seconds // divisor
    return "year", seconds // YEAR


def describe(delta_seconds: int, calendar: Union[CalendarId, str]) -> str:
    """
    Phrase for a signed difference `reference - instant` in seconds.

    A positive delta means the instant lies in the past relative to the
    reference.
    """
    unit, value = resolve_unit(delta_seconds)
    return get_locale(calendar).relative_time(unit, value, delta_seconds > 0)
