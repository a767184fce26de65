"""Free-text date search over the sacred calendar.

A query is first read as a sacred position (``m1 d14``, ``month 7``,
``d15``, ``1-14``) and otherwise as a short Gregorian date (``Nov 25``,
``November 25 2024``, ``Mon Nov 25``).  Appointments are matched by text.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime
from typing import Any

from . import core
from .data import APPOINTMENTS, TEKUFAH_DETAILS, sacred_month_name

_SACRED_QUERY_RE = re.compile(
    r"(?:m|month)?\s*(\d{1,2})?[\s-]*(?:d|day)?\s*(\d{1,2})?", re.IGNORECASE
)

# (format, has_year); formats without a year take the context year
_GREGORIAN_FORMATS = [
    ("%b %d", False),
    ("%b %d %Y", True),
    ("%B %d", False),
    ("%B %d %Y", True),
    ("%a %d", False),
    ("%a %b %d", False),
]


@dataclass(frozen=True)
class DateQuery:
    kind: str  # date | month | day | gregorian
    month: int | None = None
    day: int | None = None
    gregorian: date | None = None


def _parse_gregorian(query: str, context_year: int) -> date | None:
    today = date.today()
    for fmt, has_year in _GREGORIAN_FORMATS:
        text, full_fmt = query, fmt
        if fmt == "%a %d":
            # weekday and day only: the month is the current one
            text, full_fmt = f"{query} {today.month} {context_year}", f"{fmt} %m %Y"
        elif not has_year:
            text, full_fmt = f"{query} {context_year}", f"{fmt} %Y"
        try:
            return datetime.strptime(text, full_fmt).date()
        except ValueError:
            continue
    return None


def parse_date_query(query: str, context_year: int) -> DateQuery | None:
    """Read ``query`` as a sacred or Gregorian date, or return ``None``."""

    q = query.strip()
    if not q:
        return None
    match = _SACRED_QUERY_RE.fullmatch(q)
    if match and any(g is not None for g in match.groups()):
        month = int(match.group(1)) if match.group(1) else None
        day = int(match.group(2)) if match.group(2) else None
        if month is not None and month > core.MONTHS:
            return None
        if day is not None and day > 31:
            return None
        if month and day:
            return DateQuery("date", month=month, day=day)
        if month:
            return DateQuery("month", month=month)
        if day:
            return DateQuery("day", day=day)
        return None

    parsed = _parse_gregorian(q, context_year)
    if parsed is not None:
        return DateQuery("gregorian", gregorian=parsed)
    return None


def _month_item(month: int) -> dict[str, Any]:
    tekufah = TEKUFAH_DETAILS.get(month)
    return {
        "id": f"month-{month}",
        "type": "month",
        "label": f"Month {month}: {sacred_month_name(month)}",
        "description": tekufah["position"] if tekufah else f"{core.month_length(month)} days",
        "target": f"month-{month}",
    }


def _appointment_items(anchor: date) -> list[dict[str, Any]]:
    items = []
    for key, appointment in APPOINTMENTS.items():
        month, day = map(int, key.split("-"))
        gregorian = core.sacred_to_gregorian(anchor, month, day)
        items.append(
            {
                "id": f"appointment-{key}",
                "type": "appointment",
                "label": appointment.label,
                "description": (
                    f"Month {month}, Day {day} ({gregorian.isoformat()}). "
                    f"{appointment.hebrew_name}, {appointment.microcopy}. {appointment.meaning}"
                ),
                "target": f"day-{key}",
            }
        )
    return items


def _date_item(month: int, day: int, description: str) -> dict[str, Any]:
    return {
        "id": f"date-{month}-{day}",
        "type": "date",
        "label": f"Go to Month {month}, Day {day}",
        "description": description,
        "target": f"day-{month}-{day}",
    }


def search(anchor: date, query: str) -> list[dict[str, Any]]:
    """Return search results for ``query`` against ``anchor``.

    Date matches come first, followed by text matches on months and
    appointments.
    """

    term = query.strip().lower()
    if not term:
        return []

    special: list[dict[str, Any]] = []
    dq = parse_date_query(query, anchor.year)
    if dq is not None:
        if dq.kind == "date":
            special.append(_date_item(dq.month, dq.day, "Navigate directly to the specified date."))
        elif dq.kind == "month":
            special.append(_month_item(dq.month))
        elif dq.kind == "day":
            for month in range(1, core.MONTHS + 1):
                if dq.day <= core.month_length(month):
                    gregorian = core.sacred_to_gregorian(anchor, month, dq.day)
                    special.append(_date_item(month, dq.day, gregorian.isoformat()))
        elif dq.kind == "gregorian":
            sacred = core.gregorian_to_sacred(anchor, dq.gregorian)
            if sacred is not None:
                item = _date_item(
                    sacred.month,
                    sacred.day,
                    f"This corresponds to Month {sacred.month}, Day {sacred.day}.",
                )
                item["label"] = f"Go to {dq.gregorian.strftime('%b %d, %Y')}"
                item["id"] = f"gregorian-{dq.gregorian.isoformat()}"
                special.append(item)

    index = [_month_item(m) for m in range(1, core.MONTHS + 1)] + _appointment_items(anchor)
    seen = {item["id"] for item in special}
    matched = [
        item
        for item in index
        if item["id"] not in seen
        and (term in item["label"].lower() or term in item["description"].lower())
    ]
    return special + matched
