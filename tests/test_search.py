import datetime

import pytest

from sacred_calendar.search import DateQuery, parse_date_query, search

ANCHOR = datetime.date(2024, 3, 25)


@pytest.mark.parametrize(
    "query, expected",
    [
        ("m1 d14", DateQuery("date", month=1, day=14)),
        ("Month 7 Day 15", DateQuery("date", month=7, day=15)),
        ("1-14", DateQuery("date", month=1, day=14)),
        ("m7", DateQuery("month", month=7)),
        ("d15", DateQuery("day", day=15)),
        ("day 15", DateQuery("day", day=15)),
    ],
)
def test_parse_sacred_queries(query, expected):
    assert parse_date_query(query, 2024) == expected


@pytest.mark.parametrize("query", ["m", "d", "m13", "d32", "14", ""])
def test_parse_rejects_out_of_range(query):
    assert parse_date_query(query, 2024) is None


def test_parse_gregorian_queries():
    assert parse_date_query("Nov 25", 2024).gregorian == datetime.date(2024, 11, 25)
    assert parse_date_query("November 25 2023", 2024).gregorian == datetime.date(2023, 11, 25)
    assert parse_date_query("Mon Nov 25", 2024).gregorian == datetime.date(2024, 11, 25)
    assert parse_date_query("Feb 29", 2024).gregorian == datetime.date(2024, 2, 29)


def test_search_sacred_date_first():
    results = search(ANCHOR, "m1 d14")
    assert results[0]["id"] == "date-1-14"
    assert results[0]["target"] == "day-1-14"


def test_search_gregorian_date_maps_into_cycle():
    results = search(ANCHOR, "Apr 24")
    assert results[0]["label"] == "Go to Apr 24, 2024"
    assert "Month 2, Day 1" in results[0]["description"]


def test_search_gregorian_date_before_anchor_has_no_date_result():
    results = search(ANCHOR, "Jan 5")
    assert not [r for r in results if r["type"] == "date"]


def test_search_day_lists_every_month():
    results = search(ANCHOR, "d31")
    assert [r["id"] for r in results if r["type"] == "date"] == [
        "date-3-31",
        "date-6-31",
        "date-9-31",
        "date-12-31",
    ]


def test_search_month_and_text():
    assert search(ANCHOR, "m7")[0]["label"] == "Month 7: Ethanim"
    labels = [r["label"] for r in search(ANCHOR, "sukkot")]
    assert "Sukkot (Day 2)" in labels
    assert search(ANCHOR, "   ") == []


def test_search_matches_hebrew_names():
    ids = [r["id"] for r in search(ANCHOR, "chag matzot")]
    assert ids == ["appointment-1-15", "appointment-1-21"]
