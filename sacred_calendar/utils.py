"""Sacred calendar helper utilities."""

from __future__ import annotations

import calendar
import re
from datetime import date, datetime
from typing import Any

from django.core.exceptions import ValidationError

from . import conf, core
from .validators import validate_sacred_date_parts

DATE_ERROR = "Date must be in YYYY-MM-DD or DD-MM-YYYY format"
SACRED_ERROR = "Use M-D, M/D or 'month M day D'"

_ISO_RE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")
_DMY_RE = re.compile(r"(\d{1,2})-(\d{1,2})-(\d{4})")
_SACRED_RE = re.compile(
    r"(?:m|month)?\s*(\d{1,2})(?:\s*[-/,]\s*|\s*(?:d|day)\s*|\s+)(\d{1,2})", re.IGNORECASE
)


def as_calendar_date(value: Any) -> date | None:
    """Tolerant parser returning a plain calendar date.

    Accepts multiple input types:

    * ``None``/``""``/``b""`` → ``None``
    * ``datetime`` → its ``date()`` (time of day is dropped)
    * ``date`` → unchanged
    * ``tuple``/``list`` of three items → ``date(y, m, d)``
    * ``bytes`` → decoded as UTF-8
    * ``str`` in formats ``YYYY-MM-DD`` or ``DD-MM-YYYY``

    Raises :class:`django.core.exceptions.ValidationError` on invalid input.
    """

    if value in (None, "", b""):
        return None

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value

    if isinstance(value, list | tuple) and len(value) == 3:
        try:
            y, m, d = [int(v) for v in value]
            return date(y, m, d)
        except (TypeError, ValueError) as exc:
            raise ValidationError(DATE_ERROR) from exc

    if isinstance(value, bytes):
        try:
            value = value.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise ValidationError(DATE_ERROR) from exc

    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
        iso = _ISO_RE.fullmatch(value)
        if iso:
            y, m, d = map(int, iso.groups())
        else:
            dmy = _DMY_RE.fullmatch(value)
            if not dmy:
                raise ValidationError(DATE_ERROR)
            d, m, y = map(int, dmy.groups())
        try:
            return date(y, m, d)
        except ValueError as exc:
            raise ValidationError(DATE_ERROR) from exc

    raise ValidationError(DATE_ERROR)


def parse_sacred_date(value: Any) -> core.SacredDate:
    """Parse ``"1-14"``, ``"1/14"``, ``"m1 d14"`` or ``(1, 14)``.

    The result is range checked; invalid input raises ``ValidationError``.
    """

    if isinstance(value, core.SacredDate):
        month, day = value
    elif isinstance(value, list | tuple) and len(value) == 2:
        try:
            month, day = [int(v) for v in value]
        except (TypeError, ValueError) as exc:
            raise ValidationError(SACRED_ERROR) from exc
    elif isinstance(value, str):
        match = _SACRED_RE.fullmatch(value.strip())
        if not match:
            raise ValidationError(SACRED_ERROR)
        month, day = map(int, match.groups())
    else:
        raise ValidationError(SACRED_ERROR)
    validate_sacred_date_parts(month, day)
    return core.SacredDate(month, day)


def sacred_key(month: int, day: int) -> str:
    """Return the ``M-D`` key used for appointments and grid cells."""

    return f"{month}-{day}"


def format_sacred_date(value: core.SacredDate) -> str:
    return f"Month {value.month}, Day {value.day}"


def to_storage(value: date) -> str:
    """Format a calendar date to storage format ``YYYY-MM-DD``."""

    return value.isoformat()


def from_storage(value: Any) -> date | None:
    """Parse storage format, returning ``None`` when parsing fails."""

    if value is None or value in ("", b"", "None"):
        return None
    try:
        return as_calendar_date(value)
    except ValidationError:
        return None


def default_anchor(year: int | None = None) -> date:
    """Return the configured default Month 1 Day 1 for ``year``.

    ``year`` defaults to the current Gregorian year.  A configured 02-29
    falls back to 02-28 outside leap years.
    """

    if year is None:
        year = date.today().year
    month, day = conf.default_anchor_month_day()
    if (month, day) == (2, 29) and not calendar.isleap(year):
        day = 28
    return date(year, month, day)
