"""Canonical 364-day calendar implementation.

This module is the single source of truth for the sacred calendar used
across the project.  The year has 12 months of 30 days; the Tekufah months
(3, 6, 9 and 12) carry a 31st day, giving exactly 364 days (52 weeks).

Every conversion takes the anchor, the Gregorian date of Month 1 Day 1,
as an explicit argument.  Dates are plain :class:`datetime.date` values;
callers convert ``datetime`` or string input at the edges
(see :mod:`sacred_calendar.utils`).
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import List, NamedTuple

MONTHS: int = 12
WEEK_LENGTH: int = 7
LAST_SABBATH_DAY: int = 28
TEKUFAH_MONTHS: frozenset[int] = frozenset({3, 6, 9, 12})
YEAR_LENGTH: int = 364
# latest anchor whose whole cycle is representable
LAST_ANCHOR: date = date.max - timedelta(days=YEAR_LENGTH - 1)


class InvalidSacredDate(ValueError):
    """Raised for a month/day pair that does not exist in the calendar."""


class SacredDate(NamedTuple):
    month: int
    day: int


class CyclePosition(NamedTuple):
    cycle: int
    month: int
    day: int

    @property
    def sacred(self) -> SacredDate:
        return SacredDate(self.month, self.day)


def is_tekufah_month(month: int) -> bool:
    """Return True if ``month`` ends with a Tekufah day."""

    return month in TEKUFAH_MONTHS


def month_length(month: int) -> int:
    return 31 if is_tekufah_month(month) else 30


def month_lengths() -> List[int]:
    """Return the twelve month lengths in order."""

    return [month_length(m) for m in range(1, MONTHS + 1)]


def year_length() -> int:
    return sum(month_lengths())


def days_before_month(month: int) -> int:
    """Return the number of days from Month 1 Day 1 to day 1 of ``month``."""

    offset = 0
    for m in range(1, month):
        offset += month_length(m)
    return offset


def check_sacred_date(month: int, day: int) -> None:
    """Raise :class:`InvalidSacredDate` unless ``month``/``day`` exist."""

    if not 1 <= month <= MONTHS:
        raise InvalidSacredDate(f"month {month} out of range 1..{MONTHS}")
    max_day = month_length(month)
    if not 1 <= day <= max_day:
        raise InvalidSacredDate(f"month {month} has {max_day} days, got day {day}")


def day_of_year(month: int, day: int) -> int:
    """Convert month/day to a 1-based day-of-year."""

    check_sacred_date(month, day)
    return days_before_month(month) + day


def from_day_of_year(doy: int) -> SacredDate | None:
    """Return the sacred date for 1-based ``doy`` or ``None`` past the year."""

    if doy < 1:
        return None
    month = 1
    remaining = doy
    while month <= MONTHS:
        length = month_length(month)
        if remaining <= length:
            return SacredDate(month, remaining)
        remaining -= length
        month += 1
    return None


def sacred_to_gregorian(anchor: date, month: int, day: int, *, strict: bool = False) -> date:
    """Return the Gregorian date of ``month``/``day`` for ``anchor``.

    Inputs are not range checked unless ``strict`` is set: day 31 of a
    30-day month lands on day 1 of the following month, exactly as the
    offset arithmetic dictates.
    """

    if strict:
        check_sacred_date(month, day)
    offset = days_before_month(month) + day - 1
    try:
        return anchor + timedelta(days=offset)
    except OverflowError as exc:
        raise InvalidSacredDate(f"month {month} day {day} falls past {date.max.isoformat()}") from exc


def gregorian_to_sacred(anchor: date, target: date) -> SacredDate | None:
    """Return the sacred date of ``target`` or ``None`` when out of cycle.

    ``None`` means the target precedes the anchor, or lies 364 or more
    days after it.  The cycle is never wrapped; see :func:`locate`.
    """

    diff_days = (target - anchor).days
    if diff_days < 0:
        return None
    return from_day_of_year(diff_days + 1)


def locate(anchor: date, target: date) -> CyclePosition:
    """Place ``target`` in any cycle relative to ``anchor``.

    Cycle 0 starts at the anchor; earlier dates fall in negative cycles.
    """

    cycle, day_in_cycle = divmod((target - anchor).days, YEAR_LENGTH)
    month, day = from_day_of_year(day_in_cycle + 1)
    return CyclePosition(cycle, month, day)


def cycle_anchor(anchor: date, cycle: int) -> date:
    """Return Month 1 Day 1 of ``cycle`` counted from ``anchor``."""

    try:
        return anchor + timedelta(days=cycle * YEAR_LENGTH)
    except OverflowError as exc:
        raise InvalidSacredDate(f"cycle {cycle} is outside the supported date range") from exc


def is_sabbath(day: int) -> bool:
    """Weekly Sabbath: every seventh day up to day 28."""

    return day % WEEK_LENGTH == 0 and day <= LAST_SABBATH_DAY


def day_of_week_index(day: int) -> int:
    """Return the 0-based weekday position of ``day`` within its month."""

    return (day - 1) % WEEK_LENGTH


def is_transitional_day(day: int) -> bool:
    """Days 29..31 sit outside the weekly count."""

    return day > LAST_SABBATH_DAY


def is_tekufah_day(month: int, day: int) -> bool:
    return is_tekufah_month(month) and day == 31
