import json

import pytest
from django.test import Client, override_settings
from django.urls import reverse

pytestmark = pytest.mark.django_db

ANCHOR = "2024-03-25"


def test_set_anchor_stores_session_and_drives_conversions():
    c = Client()
    r = c.post(
        reverse("sacred_calendar:set_anchor"),
        data=json.dumps({"anchor": ANCHOR}),
        content_type="application/json",
    )
    assert r.status_code == 200
    assert r.json() == {"ok": True, "anchor": ANCHOR}
    assert c.session["sacred_anchor"] == ANCHOR

    r = c.get(reverse("sacred_calendar:to_sacred"), {"date": "2024-04-24"})
    data = r.json()
    assert data["anchor"] == ANCHOR
    assert data["sacred"]["month"] == 2 and data["sacred"]["day"] == 1


def test_set_anchor_accepts_form_post():
    c = Client()
    r = c.post(reverse("sacred_calendar:set_anchor"), {"anchor": "25-03-2024"})
    assert r.status_code == 200
    assert r.json()["anchor"] == ANCHOR


def test_set_anchor_rejects_bad_input():
    c = Client()
    r = c.post(
        reverse("sacred_calendar:set_anchor"),
        data=json.dumps({"anchor": "nonsense-date"}),
        content_type="application/json",
    )
    assert r.status_code == 400
    assert "error" in r.json()
    r = c.post(reverse("sacred_calendar:set_anchor"), {})
    assert r.status_code == 400


def test_to_gregorian_tekufah_day(client):
    r = client.get(reverse("sacred_calendar:to_gregorian"), {"anchor": ANCHOR, "month": 3, "day": 31})
    assert r.status_code == 200
    assert r.json()["gregorian"] == "2024-06-23"


def test_to_gregorian_rejects_invalid_parts(client):
    url = reverse("sacred_calendar:to_gregorian")
    assert client.get(url, {"anchor": ANCHOR, "month": 2, "day": 31}).status_code == 400
    assert client.get(url, {"anchor": ANCHOR, "month": 13, "day": 1}).status_code == 400
    assert client.get(url, {"anchor": ANCHOR, "month": "x", "day": 1}).status_code == 400


def test_to_sacred_out_of_cycle_returns_null_with_cycle(client):
    url = reverse("sacred_calendar:to_sacred")
    data = client.get(url, {"anchor": ANCHOR, "date": "2023-01-01"}).json()
    assert data["sacred"] is None
    assert data["cycle"]["cycle"] == -2

    data = client.get(url, {"anchor": ANCHOR, "date": "2025-03-24"}).json()
    assert data["sacred"] is None
    assert data["cycle"] == {"cycle": 1, "month": 1, "day": 1}


def test_to_sacred_requires_date(client):
    assert client.get(reverse("sacred_calendar:to_sacred"), {"anchor": ANCHOR}).status_code == 400


def test_year_meta(client):
    data = client.get(reverse("sacred_calendar:year_meta"), {"anchor": ANCHOR}).json()
    assert data["year_length"] == 364
    assert data["tekufah_months"] == [3, 6, 9, 12]
    assert data["months"][0]["name"] == "Aviv"
    assert data["months"][3]["starts"] == "2024-06-24"
    assert data["months"][2]["tekufah"]["label"] == "Vernal Tekufah"


def test_year_meta_defaults_to_march_25(client):
    from datetime import date

    data = client.get(reverse("sacred_calendar:year_meta")).json()
    assert data["anchor"] == date(date.today().year, 3, 25).isoformat()


def test_month_grid(client):
    r = client.get(reverse("sacred_calendar:month_grid", args=[1]), {"anchor": ANCHOR})
    data = r.json()
    assert len(data["days"]) == 30
    passover = data["days"][13]
    assert passover["key"] == "1-14"
    assert passover["is_sabbath"] is True
    assert passover["appointment"]["label"] == "Passover (Pesach)"
    assert passover["gregorian_date"] == "2024-04-07"


def test_month_grid_unknown_month(client):
    assert client.get(reverse("sacred_calendar:month_grid", args=[13])).status_code == 404


def test_export_ics(client):
    r = client.get(reverse("sacred_calendar:export_ics"), {"anchor": ANCHOR})
    assert r.status_code == 200
    assert r["Content-Type"].startswith("text/calendar")
    assert 'filename="yahuah-calendar-2024.ics"' in r["Content-Disposition"]
    body = r.content.decode()
    assert "DTSTART;VALUE=DATE:20240407" in body


@override_settings(SACRED_CALENDAR_ICS_ENABLED=False)
def test_export_ics_disabled(client):
    assert client.get(reverse("sacred_calendar:export_ics")).status_code == 404


def test_search_endpoint(client):
    data = client.get(reverse("sacred_calendar:search"), {"anchor": ANCHOR, "q": "m1 d14"}).json()
    assert data["results"][0]["target"] == "day-1-14"


def test_bad_anchor_override(client):
    r = client.get(reverse("sacred_calendar:year_meta"), {"anchor": "2024-02-30"})
    assert r.status_code == 400


@pytest.mark.parametrize(
    "name, params",
    [
        ("year_meta", {}),
        ("to_gregorian", {"month": 12, "day": 31}),
        ("search", {"q": "m12 d31"}),
        ("export_ics", {}),
    ],
)
def test_anchor_past_last_full_cycle_is_rejected(name, params):
    r = Client().get(reverse(f"sacred_calendar:{name}"), {"anchor": "9999-06-01", **params})
    assert r.status_code == 400
    assert "9999-01-02" in r.json()["error"]


def test_month_grid_rejects_anchor_past_last_full_cycle():
    r = Client().get(reverse("sacred_calendar:month_grid", args=[12]), {"anchor": "9999-06-01"})
    assert r.status_code == 400


def test_last_full_cycle_anchor_is_accepted():
    r = Client().get(
        reverse("sacred_calendar:to_gregorian"), {"anchor": "9999-01-02", "month": 12, "day": 31}
    )
    assert r.status_code == 200
    assert r.json()["gregorian"] == "9999-12-31"


def test_set_anchor_rejects_anchor_past_last_full_cycle():
    r = Client().post(reverse("sacred_calendar:set_anchor"), {"anchor": "9999-06-01"})
    assert r.status_code == 400
    assert "9999-01-02" in r.json()["error"]
