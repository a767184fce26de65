"""Per-day cell data for rendering a month or a whole year."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Any

from . import core
from .data import HEBREW_DAYS, Appointment, appointment_for
from .utils import sacred_key


@dataclass(frozen=True)
class DayCell:
    month: int
    day: int
    key: str
    gregorian_date: date
    day_of_week: int
    weekday_name: str
    is_sabbath: bool
    is_tekufah_day: bool
    is_transitional: bool
    appointment: Appointment | None

    def as_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["gregorian_date"] = self.gregorian_date.isoformat()
        return data


def day_cell(anchor: date, month: int, day: int) -> DayCell:
    dow = core.day_of_week_index(day)
    return DayCell(
        month=month,
        day=day,
        key=sacred_key(month, day),
        gregorian_date=core.sacred_to_gregorian(anchor, month, day),
        day_of_week=dow,
        weekday_name=HEBREW_DAYS[dow],
        is_sabbath=core.is_sabbath(day),
        is_tekufah_day=core.is_tekufah_day(month, day),
        is_transitional=core.is_transitional_day(day),
        appointment=appointment_for(month, day),
    )


def month_cells(anchor: date, month: int) -> list[DayCell]:
    """Return one cell per day of ``month`` (30 or 31)."""

    if not 1 <= month <= core.MONTHS:
        raise core.InvalidSacredDate(f"month {month} out of range 1..{core.MONTHS}")
    return [day_cell(anchor, month, d) for d in range(1, core.month_length(month) + 1)]


def year_cells(anchor: date) -> list[DayCell]:
    cells: list[DayCell] = []
    for month in range(1, core.MONTHS + 1):
        cells.extend(month_cells(anchor, month))
    return cells
