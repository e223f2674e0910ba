"""
Process-wide defaults.

The digit style and default template live in one FormatOptions value that
formatting falls back to when a call passes no options of its own. The
default timezone is attached to naive datetimes. `now()` is the clock used
when a moment is built without a value.

Environment:
  MULTICAL_DIGITS     latin | farsi | arabic
  MULTICAL_TIMEZONE   IANA zone name, e.g. "Asia/Tehran"
  MULTICAL_TEST_TIME  ISO 8601 datetime that pins now()
"""

from __future__ import annotations

import logging
import os
from contextlib import contextmanager
from dataclasses import replace
from datetime import datetime, timezone, tzinfo
from typing import Iterator, Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.parser import isoparse

from .core.errors import ValidationError
from .core.types import DigitStyle, FormatOptions

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "Y/m/d H:i:s"
DEFAULT_TIMEZONE = "UTC"

TzLike = Union[str, tzinfo, None]


def resolve_timezone(tz: TzLike) -> tzinfo:
    """Turn a zone name or tzinfo into a tzinfo; None means the configured default."""
    if tz is None:
        return _default_tz
    if isinstance(tz, tzinfo):
        return tz
    if str(tz).upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(str(tz))
    except (ZoneInfoNotFoundError, ValueError):
        raise ValidationError(f"Unknown timezone '{tz}'") from None


def _options_from_env() -> FormatOptions:
    raw = os.environ.get("MULTICAL_DIGITS")
    if not raw:
        return FormatOptions(template=DEFAULT_FORMAT)
    try:
        return FormatOptions(template=DEFAULT_FORMAT, digits=DigitStyle.coerce(raw))
    except ValueError as e:
        logger.warning("Ignoring MULTICAL_DIGITS=%r: %s", raw, e)
        return FormatOptions(template=DEFAULT_FORMAT)


def _timezone_from_env() -> tzinfo:
    raw = os.environ.get("MULTICAL_TIMEZONE")
    if raw:
        try:
            return resolve_timezone(raw)
        except ValidationError as e:
            logger.warning("Ignoring MULTICAL_TIMEZONE=%r: %s", raw, e)
    return timezone.utc


_options: FormatOptions = _options_from_env()
_default_tz: tzinfo = _timezone_from_env()


def get_options() -> FormatOptions:
    return _options


def set_options(
    *,
    template: Optional[str] = None,
    digits: Union[DigitStyle, str, None] = None,
) -> FormatOptions:
    """Replace fields of the process-wide FormatOptions and return the new value."""
    global _options
    changes = {}
    if template is not None:
        changes["template"] = template
    if digits is not None:
        changes["digits"] = DigitStyle.coerce(digits)
    _options = replace(_options, **changes)
    return _options


def reset_options() -> FormatOptions:
    global _options
    _options = FormatOptions(template=DEFAULT_FORMAT)
    return _options


def get_default_timezone() -> tzinfo:
    return _default_tz


def set_default_timezone(tz: TzLike) -> tzinfo:
    global _default_tz
    _default_tz = resolve_timezone(tz) if tz is not None else timezone.utc
    return _default_tz


@contextmanager
def override(
    *,
    template: Optional[str] = None,
    digits: Union[DigitStyle, str, None] = None,
    tz: TzLike = None,
) -> Iterator[FormatOptions]:
    """Temporarily change the defaults; the previous values are restored on exit."""
    global _options, _default_tz
    saved_options, saved_tz = _options, _default_tz
    try:
        opts = set_options(template=template, digits=digits)
        if tz is not None:
            set_default_timezone(tz)
        yield opts
    finally:
        _options, _default_tz = saved_options, saved_tz


def now(tz: TzLike = None) -> datetime:
    """Current time in `tz` (default zone when None), honouring MULTICAL_TEST_TIME."""
    zone = resolve_timezone(tz)
    test_time = os.environ.get("MULTICAL_TEST_TIME")
    if test_time:
        try:
            dt = isoparse(test_time)
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)
            return dt.astimezone(zone)
        except ValueError as e:
            logger.warning("Failed to parse MULTICAL_TEST_TIME=%r: %s", test_time, e)
    return datetime.now(zone)
