"""Locale tables keyed by calendar."""

from .base import LocaleTable, apply_digits, normalize_digits
from .arabic import ARABIC
from .english import ENGLISH
from .persian import PERSIAN
from .registry import get_locale, register_locale

__all__ = [
    "LocaleTable",
    "apply_digits",
    "normalize_digits",
    "ARABIC",
    "ENGLISH",
    "PERSIAN",
    "get_locale",
    "register_locale",
]
