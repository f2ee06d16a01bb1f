import datetime

import pytest

from app.utils import parse_date


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("2024-06-15", datetime.datetime(2024, 6, 15)),
        ("2024-06-15T08:30:00", datetime.datetime(2024, 6, 15, 8, 30)),
        ("2024-06-15T08:30:00Z", datetime.datetime(2024, 6, 15, 8, 30)),
        ("2024-06-15T10:30:00+02:00", datetime.datetime(2024, 6, 15, 8, 30)),
        (" 2024-06-15 ", datetime.datetime(2024, 6, 15)),
        ("2024", datetime.datetime(2024, 1, 1)),
        ("2024-06", datetime.datetime(2024, 6, 1)),
    ],
)
def test_parse_date_accepts_iso_values(value, expected):
    assert parse_date(value) == expected


@pytest.mark.parametrize(
    "value", [None, "", "yesterday", "2024-13-45", "2024-13", "24"]
)
def test_parse_date_returns_none_for_unparseable(value):
    assert parse_date(value) is None
