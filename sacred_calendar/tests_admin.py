from datetime import date

import pytest
from django.contrib.auth import get_user_model
from django.test import Client
from django.urls import reverse

from sacred_calendar.models import AnchorPreset


@pytest.fixture
def admin_client(db):
    User = get_user_model()
    user = User.objects.create_superuser("admin", "admin@example.com", "pass")
    client = Client()
    client.force_login(user)
    return client


def test_admin_preset_add_and_validation(admin_client):
    url = reverse("admin:sacred_calendar_anchorpreset_add")
    resp = admin_client.get(url)
    assert resp.status_code == 200

    invalid = {"name": "Q", "start_date": "2024-03-25", "_save": "Save"}
    resp_bad = admin_client.post(url, invalid)
    assert "at least 3 characters" in resp_bad.content.decode()
    assert AnchorPreset.objects.count() == 0

    valid = {**invalid, "name": "Qumran Alignment"}
    admin_client.post(url, valid)
    assert AnchorPreset.objects.count() == 1


def test_admin_changelist_shows_cycle_end(admin_client):
    AnchorPreset.objects.create(name="Spring 2024", start_date=date(2024, 3, 25))
    resp = admin_client.get(reverse("admin:sacred_calendar_anchorpreset_changelist"))
    assert resp.status_code == 200
    assert "Spring 2024" in resp.content.decode()
