import json

import pytest

from booking_analytics.adapters.csv_adapter import parse as parse_csv
from booking_analytics.adapters.json_adapter import parse as parse_json


def test_csv_parse_success(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text(
        "id,timestamp,status,category\n"
        "a,2025-01-01T09:00:00,Completed,Haircut\n"
        "b,2025-01-01T10:00:00,No Arrival,\n",
        encoding="utf-8",
    )
    events = parse_csv(str(path))
    assert len(events) == 2
    assert events[0].timestamp.hour == 9
    assert events[0].category == "Haircut"
    assert events[1].status == "No Arrival"
    assert events[1].category is None


def test_csv_keeps_unparseable_timestamp(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text("id,timestamp,status\na,bad,Completed\n", encoding="utf-8")
    events = parse_csv(str(path))
    assert events[0].timestamp == "bad"


def test_csv_parse_missing_field(tmp_path):
    path = tmp_path / "events.csv"
    path.write_text("id,timestamp,status\na,2025-01-01T09:00:00,\n", encoding="utf-8")
    with pytest.raises(ValueError, match="Row 2"):
        parse_csv(str(path))


def test_json_parse_api_page(tmp_path):
    path = tmp_path / "events.json"
    payload = {
        "results": [
            {"_id": "a", "appointmentDateTime": "2025-01-01T09:00:00Z", "status": "Upcoming"},
            {"id": "b", "timestamp": "2025-01-02T10:00:00", "status": "Completed", "category": "Stock"},
        ]
    }
    path.write_text(json.dumps(payload), encoding="utf-8")
    events = parse_json(str(path))
    assert [event.id for event in events] == ["a", "b"]
    assert events[0].timestamp.utcoffset().total_seconds() == 0


def test_json_parse_malformed(tmp_path):
    path = tmp_path / "events.json"
    path.write_text(json.dumps({"count": 1}), encoding="utf-8")
    with pytest.raises(ValueError):
        parse_json(str(path))

    path.write_text(json.dumps([{"id": "a", "status": "Completed"}]), encoding="utf-8")
    with pytest.raises(ValueError, match="Item 1"):
        parse_json(str(path))
