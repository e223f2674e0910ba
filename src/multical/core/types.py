from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple, Union


class CalendarId(str, Enum):
    JALALI = "jalali"
    HIJRI = "hijri"
    GREGORIAN = "gregorian"

    @classmethod
    def coerce(cls, value: Union["CalendarId", str]) -> "CalendarId":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown calendar '{value}'. Available: {[c.value for c in cls]}"
            ) from None


class DigitStyle(str, Enum):
    LATIN = "latin"
    FARSI = "farsi"
    ARABIC = "arabic"

    @classmethod
    def coerce(cls, value: Union["DigitStyle", str]) -> "DigitStyle":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown digit style '{value}'. Available: {[s.value for s in cls]}"
            ) from None


@dataclass(frozen=True)
class CalendarDate:
    calendar: CalendarId
    year: int
    month: int
    day: int

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"


@dataclass(frozen=True)
class FormatOptions:
    """Rendering parameters threaded through formatting calls."""
    template: str = "Y/m/d H:i:s"
    digits: DigitStyle = DigitStyle.LATIN
