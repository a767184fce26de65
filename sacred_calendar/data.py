"""Reference data for the sacred calendar: names and appointed times."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List

from . import core

HEBREW_DAYS: List[str] = [
    "Yom Rishon",
    "Yom Sheni",
    "Yom Shelishi",
    "Yom Revi'i",
    "Yom Chamishi",
    "Yom Shishi",
    "Yom Shabbat",
]

TORAH_MONTH_NAMES: Dict[int, str] = {1: "Aviv", 2: "Ziv", 7: "Ethanim", 8: "Bul"}

_ORDINALS: Dict[int, str] = {
    3: "Third",
    4: "Fourth",
    5: "Fifth",
    6: "Sixth",
    9: "Ninth",
    10: "Tenth",
    11: "Eleventh",
    12: "Twelfth",
}

TEKUFAH_DETAILS: Dict[int, Dict[str, str]] = {
    3: {"label": "Vernal Tekufah", "position": "End of Month 3 (Spring → Summer)"},
    6: {"label": "Summer Tekufah", "position": "End of Month 6 (Summer → Autumn)"},
    9: {"label": "Autumn Tekufah", "position": "End of Month 9 (Autumn → Winter)"},
    12: {"label": "Winter Tekufah", "position": "End of Month 12 (Year Completion → Spring)"},
}


@dataclass(frozen=True)
class Appointment:
    label: str
    short_label: str
    kind: str  # moedim | high-sabbath | resurrection
    refs: str
    microcopy: str
    meaning: str
    prophetic: str
    hebrew_name: str
    day_cycle: str = "Sunrise → Sunrise"
    instructions: str = ""


def _sukkot(
    day: int,
    prophetic: str,
    meaning: str = "Dwelling in booths.",
    microcopy: str = "Moed (Festival)",
) -> Appointment:
    return Appointment(
        f"Sukkot (Day {day})", f"Sukkot D{day}", "moedim", "Lev 23:34, 39–43",
        microcopy, meaning, prophetic, "Chag HaSukkot",
    )


APPOINTMENTS: Dict[str, Appointment] = {
    "1-14": Appointment(
        "Passover (Pesach)", "Pesach", "moedim", "Exodus 12:6", "Preparation Day",
        "The Lamb is slain.", "Yahusha crucified.", "Pesach",
    ),
    "1-15": Appointment(
        "Unleavened Bread (Day 1)", "Unleavened", "high-sabbath", "Leviticus 23:6–7", "High Sabbath",
        "Beginning of freedom.", "Yahusha in the grave.", "Chag Matzot",
    ),
    "1-16": Appointment(
        "Resurrection (First Fruits)", "First Fruits", "resurrection", "1 Corinthians 15:20",
        "First Day of the Week", "Yahusha rises.", "Yahusha resurrected.", "Yom HaBikkurim",
    ),
    "1-21": Appointment(
        "Unleavened Bread (Day 7)", "Unleavened", "high-sabbath", "Leviticus 23:8", "High Sabbath",
        "Completion of deliverance.", "Walk in purity.", "Chag Matzot",
    ),
    "3-15": Appointment(
        "Shavuot (Weeks)", "Shavuot", "high-sabbath", "Lev 23:15–21", "High Sabbath",
        "Giving of the Torah/Spirit.", "Sealing of the Covenant people.", "Chag Shavuot",
    ),
    "7-1": Appointment(
        "Yom Teru'ah (Trumpets)", "Trumpets", "high-sabbath", "Lev 23:23–25", "High Sabbath",
        "Proclamation of the King's return.", "Herald of gathering.", "Yom Teru'ah",
    ),
    "7-10": Appointment(
        "Yom Kippur (Atonement)", "Atonement", "high-sabbath", "Lev 23:26–32", "High Sabbath",
        "Final judgment.", "Cleansing of the people.", "Yom haKippurim",
        day_cycle="Evening → Evening",
        instructions="Afflict your soul; complete rest.",
    ),
    "7-15": Appointment(
        "Sukkot (Tabernacles) — Day 1", "Sukkot D1", "high-sabbath", "Lev 23:34–35", "High Sabbath",
        "Yahusha dwelling with man.", "Kingdom establishment begins.", "Chag HaSukkot",
    ),
    "7-16": _sukkot(2, "Ongoing joy of the Kingdom."),
    "7-17": _sukkot(3, "Joy and provision."),
    "7-18": _sukkot(4, "Anticipation of ingathering."),
    "7-19": _sukkot(5, "Nations gathered."),
    "7-20": _sukkot(6, "", meaning="Preparation for completion."),
    "7-21": _sukkot(
        7, "Final Sabbath-like joy.", meaning="Completion of rejoicing.", microcopy="Festival Day (Moed)"
    ),
    "7-22": Appointment(
        "Shemini Atzeret (Eighth Day)", "Atzeret", "high-sabbath", "Lev 23:36", "High Sabbath",
        "Eternal Assembly.", "The age to come.", "Shemini Atzeret",
    ),
}


def sacred_month_name(month: int) -> str:
    """Return the display name of ``month``.

    Months named in the Torah use that name; the rest are ordinal.
    """

    if not 1 <= month <= core.MONTHS:
        raise core.InvalidSacredDate(f"month {month} out of range 1..{core.MONTHS}")
    if month in TORAH_MONTH_NAMES:
        return TORAH_MONTH_NAMES[month]
    return f"The {_ORDINALS[month]} Month"


def appointment_for(month: int, day: int) -> Appointment | None:
    return APPOINTMENTS.get(f"{month}-{day}")
