from __future__ import annotations
from typing import Dict, Union

from ..core.types import CalendarId
from .arabic import ARABIC
from .base import LocaleTable
from .english import ENGLISH
from .persian import PERSIAN

_REGISTRY: Dict[CalendarId, LocaleTable] = {}

def register_locale(calendar: Union[CalendarId, str], table: LocaleTable) -> None:
    _REGISTRY[CalendarId.coerce(calendar)] = table

def get_locale(calendar: Union[CalendarId, str]) -> LocaleTable:
    cal = CalendarId.coerce(calendar)
    if cal not in _REGISTRY:
        raise KeyError(f"No locale registered for '{cal.value}'. Available: {sorted(c.value for c in _REGISTRY)}")
    return _REGISTRY[cal]

register_locale(CalendarId.JALALI, PERSIAN)
register_locale(CalendarId.HIJRI, ARABIC)
register_locale(CalendarId.GREGORIAN, ENGLISH)
