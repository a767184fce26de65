from datetime import date, timedelta

import pytest
from django.core.exceptions import ValidationError

from . import core
from .forms import AnchorDateFormField, SacredDateFormField
from .utils import as_calendar_date, from_storage, parse_sacred_date, to_storage

ANCHOR = date(2024, 3, 25)


def _all_sacred_dates():
    for month in range(1, 13):
        for day in range(1, core.month_length(month) + 1):
            yield month, day


def test_year_is_364_days():
    assert core.year_length() == 364
    assert sum(core.month_lengths()) == core.YEAR_LENGTH
    assert [m for m in range(1, 13) if core.month_length(m) == 31] == [3, 6, 9, 12]


def test_exact_anchor_is_month_1_day_1():
    assert core.gregorian_to_sacred(ANCHOR, ANCHOR) == (1, 1)


def test_day_before_anchor_is_out_of_cycle():
    assert core.gregorian_to_sacred(ANCHOR, ANCHOR - timedelta(days=1)) is None
    assert core.gregorian_to_sacred(ANCHOR, date(2023, 1, 1)) is None


def test_cycle_overflow_is_out_of_cycle():
    assert core.gregorian_to_sacred(ANCHOR, ANCHOR + timedelta(days=363)) == (12, 31)
    assert core.gregorian_to_sacred(ANCHOR, ANCHOR + timedelta(days=364)) is None


def test_month_boundaries():
    assert core.gregorian_to_sacred(ANCHOR, date(2024, 4, 23)) == (1, 30)
    assert core.gregorian_to_sacred(ANCHOR, date(2024, 4, 24)) == (2, 1)


def test_tekufah_day_and_following_quarter():
    assert core.sacred_to_gregorian(ANCHOR, 3, 31) == date(2024, 6, 23)
    assert core.sacred_to_gregorian(ANCHOR, 4, 1) == date(2024, 6, 24)
    assert core.is_tekufah_day(3, 31)
    assert not core.is_tekufah_day(4, 30)


def test_round_trip_every_day_of_the_cycle():
    for month, day in _all_sacred_dates():
        g = core.sacred_to_gregorian(ANCHOR, month, day)
        assert core.gregorian_to_sacred(ANCHOR, g) == (month, day)


def test_inverse_round_trip_and_monotonicity():
    previous = None
    for offset in range(364):
        g = ANCHOR + timedelta(days=offset)
        sd = core.gregorian_to_sacred(ANCHOR, g)
        assert core.sacred_to_gregorian(ANCHOR, sd.month, sd.day) == g
        if previous is not None:
            if previous.day == core.month_length(previous.month):
                assert sd == (previous.month + 1, 1)
            else:
                assert sd == (previous.month, previous.day + 1)
        previous = sd


def test_leap_day_in_the_gregorian_span():
    anchor = date(2023, 12, 1)
    assert core.gregorian_to_sacred(anchor, date(2024, 3, 1)) == (4, 1)
    assert core.sacred_to_gregorian(anchor, 3, 31) == date(2024, 2, 29)


def test_unchecked_day_spills_into_next_month():
    assert core.sacred_to_gregorian(ANCHOR, 1, 31) == core.sacred_to_gregorian(ANCHOR, 2, 1)


def test_strict_conversion_rejects_bad_parts():
    with pytest.raises(core.InvalidSacredDate):
        core.sacred_to_gregorian(ANCHOR, 1, 31, strict=True)
    with pytest.raises(core.InvalidSacredDate):
        core.sacred_to_gregorian(ANCHOR, 13, 1, strict=True)
    with pytest.raises(ValueError):
        core.check_sacred_date(2, 0)


def test_sabbaths_are_fixed():
    sabbaths = [d for d in range(1, 32) if core.is_sabbath(d)]
    assert sabbaths == [7, 14, 21, 28]
    for day in (29, 30, 31):
        assert not core.is_sabbath(day)
        assert core.is_transitional_day(day)


def test_day_of_week_index():
    assert core.day_of_week_index(1) == 0
    assert core.day_of_week_index(7) == 6
    assert core.day_of_week_index(8) == 0
    assert core.day_of_week_index(29) == 0


def test_locate_wraps_cycles():
    assert core.locate(ANCHOR, ANCHOR) == (0, 1, 1)
    assert core.locate(ANCHOR, ANCHOR + timedelta(days=364)) == (1, 1, 1)
    assert core.locate(ANCHOR, ANCHOR - timedelta(days=1)) == (-1, 12, 31)
    position = core.locate(ANCHOR, date(2025, 6, 23))
    assert position.cycle == 1
    assert core.cycle_anchor(ANCHOR, 1) + timedelta(days=90) == date(2025, 6, 22)
    assert position.sacred == (4, 1)


def test_parse_and_store_dates():
    assert as_calendar_date("2024-03-25") == ANCHOR
    assert as_calendar_date("25-03-2024") == ANCHOR
    assert to_storage(ANCHOR) == "2024-03-25"
    assert from_storage("2024-03-25") == ANCHOR
    assert from_storage("bad") is None


def test_formfields_clean():
    assert AnchorDateFormField().clean("2024-03-25") == ANCHOR
    assert SacredDateFormField().clean("m3 d31") == (3, 31)
    assert SacredDateFormField().prepare_value(parse_sacred_date("7-15")) == "7-15"


def test_invalid_sacred_day():
    field = SacredDateFormField()
    with pytest.raises(ValidationError, match="Month 2 has 30 days"):
        field.clean("2-31")


def test_overflow_past_date_max_is_invalid_sacred_date():
    assert core.LAST_ANCHOR == date(9999, 1, 2)
    assert core.sacred_to_gregorian(core.LAST_ANCHOR, 12, 31) == date.max
    with pytest.raises(core.InvalidSacredDate):
        core.sacred_to_gregorian(date(9999, 6, 1), 12, 31)
    with pytest.raises(core.InvalidSacredDate):
        core.cycle_anchor(date(9999, 6, 1), 1)


def test_anchor_field_rejects_unrepresentable_cycle():
    assert AnchorDateFormField().clean("9999-01-02") == core.LAST_ANCHOR
    with pytest.raises(ValidationError, match="on or before 9999-01-02"):
        AnchorDateFormField().clean("9999-06-01")
