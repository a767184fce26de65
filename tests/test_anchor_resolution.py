import datetime

import pytest
from django.contrib.sessions.backends.db import SessionStore
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.test import RequestFactory, override_settings

from sacred_calendar import anchors
from sacred_calendar.forms import AnchorPresetForm
from sacred_calendar.models import AnchorPreset
from sacred_calendar.utils import as_calendar_date, default_anchor
from sacred_calendar.validators import validate_sacred_date_parts

pytestmark = pytest.mark.django_db


@pytest.fixture
def request_with_session():
    request = RequestFactory().get("/")
    request.session = SessionStore()
    return request


def test_default_anchor_is_march_25(request_with_session):
    assert anchors.resolve_anchor(request_with_session) == datetime.date(
        datetime.date.today().year, 3, 25
    )


@override_settings(SACRED_CALENDAR_DEFAULT_ANCHOR="03-20")
def test_default_anchor_from_settings():
    assert default_anchor(2025) == datetime.date(2025, 3, 20)


@override_settings(SACRED_CALENDAR_DEFAULT_ANCHOR="02-29")
def test_leap_day_default_anchor_falls_back_in_common_years():
    assert default_anchor(2024) == datetime.date(2024, 2, 29)
    assert default_anchor(2025) == datetime.date(2025, 2, 28)


@pytest.mark.parametrize("value", ["March 25", "13-01", "04-31", ""])
def test_malformed_default_anchor_setting(value):
    with override_settings(SACRED_CALENDAR_DEFAULT_ANCHOR=value):
        with pytest.raises(ImproperlyConfigured, match="SACRED_CALENDAR_DEFAULT_ANCHOR"):
            default_anchor(2025)


def test_session_anchor_beats_default(request_with_session):
    anchors.set_session_anchor(request_with_session, datetime.date(2024, 3, 25))
    assert anchors.resolve_anchor(request_with_session) == datetime.date(2024, 3, 25)


def test_preset_beats_session_anchor(request_with_session):
    preset = AnchorPreset.objects.create(name="Qumran", start_date=datetime.date(2024, 3, 20))
    anchors.set_session_anchor(request_with_session, datetime.date(2024, 3, 25))
    anchors.select_preset(request_with_session, preset)
    assert anchors.resolve_anchor(request_with_session) == datetime.date(2024, 3, 20)

    anchors.clear_preset(request_with_session)
    assert anchors.resolve_anchor(request_with_session) == datetime.date(2024, 3, 25)


def test_stale_preset_is_dropped(request_with_session):
    preset = AnchorPreset.objects.create(name="Gone soon", start_date=datetime.date(2024, 3, 20))
    anchors.select_preset(request_with_session, preset)
    preset.delete()
    assert anchors.active_preset(request_with_session) is None
    assert anchors.SESSION_PRESET_KEY not in request_with_session.session


def test_as_calendar_date_accepts_edge_types():
    assert as_calendar_date(None) is None
    assert as_calendar_date(b"2024-03-25") == datetime.date(2024, 3, 25)
    assert as_calendar_date(datetime.datetime(2024, 3, 25, 23, 59)) == datetime.date(2024, 3, 25)
    assert as_calendar_date((2024, 3, 25)) == datetime.date(2024, 3, 25)
    with pytest.raises(ValidationError):
        as_calendar_date("2024/03/25")
    with pytest.raises(ValidationError):
        as_calendar_date(20240325)


def test_validators():
    validate_sacred_date_parts(3, 31)
    with pytest.raises(ValidationError, match="Month 4 has 30 days"):
        validate_sacred_date_parts(4, 31)
    with pytest.raises(ValidationError):
        validate_sacred_date_parts(0, 1)


def test_preset_form():
    form = AnchorPresetForm(data={"name": " Qumran Alignment ", "start_date": "2024-03-20"})
    assert form.is_valid(), form.errors
    preset = form.save()
    assert preset.name == "Qumran Alignment"
    assert preset.start_date == datetime.date(2024, 3, 20)

    form = AnchorPresetForm(data={"name": "Qu", "start_date": "2024-03-20"})
    assert not form.is_valid()
    assert "name" in form.errors
