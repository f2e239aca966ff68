from datetime import datetime, timezone

import pytest

from stockroom.time_utils import parse_stock_date, to_utc_z


@pytest.mark.parametrize("value,expected", [
    ("2026-03-01", datetime(2026, 3, 1)),
    (" 2026-03-01 ", datetime(2026, 3, 1)),
    ("2026-03-01T09:30", datetime(2026, 3, 1, 9, 30)),
    ("2026-03-01T09:30:00Z", datetime(2026, 3, 1, 9, 30)),
    ("2026-03-01T12:30:00+03:00", datetime(2026, 3, 1, 9, 30)),
])
def test_parse_stock_date(value, expected):
    assert parse_stock_date(value) == expected


@pytest.mark.parametrize("value", ["", "yesterday", "2026-13-01", "Z"])
def test_parse_stock_date_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_stock_date(value)


def test_to_utc_z():
    assert to_utc_z(None) is None
    assert to_utc_z(datetime(2026, 3, 1, 9, 30, 5, 999)) == "2026-03-01T09:30:05Z"
    aware = datetime(2026, 3, 1, 12, 30, tzinfo=timezone.utc).astimezone()
    assert to_utc_z(aware) == "2026-03-01T12:30:00Z"
