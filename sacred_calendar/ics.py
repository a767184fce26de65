from __future__ import annotations

import logging
from datetime import date, datetime, timezone

from . import conf, core
from .data import APPOINTMENTS, Appointment

logger = logging.getLogger(__name__)

PRODID = "-//Yahuah's Calendar//EN"
LOCATION = "Yahuah's Calendar"


def escape_ics(text: str) -> str:
    r"""Escape for ICS (\, \;, \, and \n → \n)."""

    return text.replace("\\", "\\\\").replace(";", "\\;").replace(",", "\\,").replace("\n", "\\n")


def build_appointment_vevent(
    key: str, appointment: Appointment, anchor: date, year: int, dtstamp: str
) -> str:
    """Build one all-day VEVENT for the appointment stored under ``key``."""

    month, day = map(int, key.split("-"))
    start = core.sacred_to_gregorian(anchor, month, day)
    parts = (
        f"{appointment.microcopy}.",
        appointment.meaning,
        appointment.prophetic,
        appointment.instructions,
    )
    description = " ".join(part for part in parts if part)
    lines = [
        "BEGIN:VEVENT",
        f"UID:{key}-{year}@yahuah-calendar",
        f"DTSTAMP:{dtstamp}",
        f"DTSTART;VALUE=DATE:{start.strftime('%Y%m%d')}",
        f"SUMMARY:{escape_ics(appointment.label)}",
        f"DESCRIPTION:{escape_ics(description)}",
        f"LOCATION:{escape_ics(LOCATION)}",
        "END:VEVENT",
    ]
    return "\r\n".join(lines)


def build_ics(anchor: date, year: int | None = None) -> str:
    """Return a VCALENDAR with every appointed time of the cycle at ``anchor``.

    ``year`` only labels the UIDs and defaults to the anchor's year.  Returns
    ``""`` when export is disabled in settings.
    """

    if not conf.ics_enabled():
        return ""
    if year is None:
        year = anchor.year
    dtstamp = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%SZ")
    events = [
        build_appointment_vevent(key, appointment, anchor, year, dtstamp)
        for key, appointment in APPOINTMENTS.items()
    ]
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{PRODID}",
        "CALSCALE:GREGORIAN",
        "METHOD:PUBLISH",
        *events,
        "END:VCALENDAR",
    ]
    logger.info("ICS export for anchor %s: %d events", anchor.isoformat(), len(events))
    return "\r\n".join(lines) + "\r\n"


__all__ = ["escape_ics", "build_appointment_vevent", "build_ics"]
