import re
from datetime import date

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

_MONTH_DAY_RE = re.compile(r"(\d{1,2})-(\d{1,2})")


def default_anchor_month_day() -> tuple[int, int]:
    """Return the ``(month, day)`` of the default anchor, ``MM-DD`` in settings."""

    raw = str(getattr(settings, "SACRED_CALENDAR_DEFAULT_ANCHOR", "03-25")).strip()
    match = _MONTH_DAY_RE.fullmatch(raw)
    if match:
        month, day = map(int, match.groups())
        try:
            # leap year, so 02-29 is accepted
            date(2000, month, day)
        except ValueError:
            pass
        else:
            return month, day
    raise ImproperlyConfigured(f"SACRED_CALENDAR_DEFAULT_ANCHOR must be a MM-DD date, got {raw!r}")


def ics_enabled() -> bool:
    return bool(getattr(settings, "SACRED_CALENDAR_ICS_ENABLED", True))
