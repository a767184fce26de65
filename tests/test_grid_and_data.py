import datetime

import pytest

from sacred_calendar import core
from sacred_calendar.data import APPOINTMENTS, HEBREW_DAYS, sacred_month_name
from sacred_calendar.grid import month_cells, year_cells

ANCHOR = datetime.date(2024, 3, 25)


def test_month_names():
    assert sacred_month_name(1) == "Aviv"
    assert sacred_month_name(8) == "Bul"
    assert sacred_month_name(3) == "The Third Month"
    assert sacred_month_name(12) == "The Twelfth Month"
    with pytest.raises(core.InvalidSacredDate):
        sacred_month_name(0)


def test_appointments_are_valid_sacred_dates():
    for key in APPOINTMENTS:
        month, day = map(int, key.split("-"))
        core.check_sacred_date(month, day)


def test_month_cells_tekufah_month():
    cells = month_cells(ANCHOR, 3)
    assert len(cells) == 31
    last = cells[-1]
    assert last.is_tekufah_day and last.is_transitional and not last.is_sabbath
    assert last.gregorian_date == datetime.date(2024, 6, 23)
    assert cells[14].appointment.short_label == "Shavuot"


def test_month_cells_weekdays():
    cells = month_cells(ANCHOR, 2)
    assert len(cells) == 30
    assert cells[0].weekday_name == HEBREW_DAYS[0]
    assert cells[6].weekday_name == "Yom Shabbat" and cells[6].is_sabbath
    assert [c.day for c in cells if c.is_sabbath] == [7, 14, 21, 28]


def test_month_cells_rejects_unknown_month():
    with pytest.raises(core.InvalidSacredDate):
        month_cells(ANCHOR, 13)


def test_year_cells_cover_the_cycle_once():
    cells = year_cells(ANCHOR)
    assert len(cells) == 364
    dates = [c.gregorian_date for c in cells]
    assert dates[0] == ANCHOR
    assert all(b - a == datetime.timedelta(days=1) for a, b in zip(dates, dates[1:]))
    assert sum(1 for c in cells if c.is_sabbath) == 48
    assert sum(1 for c in cells if c.is_tekufah_day) == 4


def test_cell_as_dict_serializes_date():
    data = month_cells(ANCHOR, 1)[13].as_dict()
    assert data["gregorian_date"] == "2024-04-07"
    assert data["appointment"]["kind"] == "moedim"


def test_appointment_detail_fields():
    atonement = APPOINTMENTS["7-10"]
    assert atonement.hebrew_name == "Yom haKippurim"
    assert atonement.day_cycle == "Evening → Evening"
    assert atonement.instructions == "Afflict your soul; complete rest."
    assert APPOINTMENTS["1-14"].microcopy == "Preparation Day"
    assert APPOINTMENTS["7-21"].microcopy == "Festival Day (Moed)"
    assert APPOINTMENTS["7-16"].day_cycle == "Sunrise → Sunrise"

    data = month_cells(ANCHOR, 1)[14].as_dict()
    assert data["appointment"]["hebrew_name"] == "Chag Matzot"
