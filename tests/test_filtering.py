from datetime import datetime

from booking_analytics.filtering import filter_events, parse_timestamp
from booking_analytics.schema import Event, Interval

INTERVAL = Interval(datetime(2024, 3, 5), datetime(2024, 3, 5, 23, 59, 59, 999999))


def test_bounds_are_inclusive():
    events = [
        Event("start", datetime(2024, 3, 5), "Completed"),
        Event("end", datetime(2024, 3, 5, 23, 59, 59, 999999), "Completed"),
        Event("before", datetime(2024, 3, 4, 23, 59, 59), "Completed"),
        Event("after", datetime(2024, 3, 6), "Completed"),
    ]
    result = filter_events(events, INTERVAL)
    assert [event.id for event in result.events] == ["start", "end"]
    assert result.invalid == 0


def test_zero_length_interval_matches_exact_timestamp():
    moment = datetime(2024, 3, 5, 10, 0)
    result = filter_events([Event("a", moment, "Upcoming")], Interval(moment, moment))
    assert len(result.events) == 1


def test_empty_input():
    result = filter_events([], INTERVAL)
    assert result.events == []
    assert result.invalid == 0


def test_invalid_timestamps_are_counted_not_raised():
    events = [
        Event("bad", "not-a-date", "Completed"),
        Event("missing", None, "Completed"),
        Event("ok", "2024-03-05T09:00:00", "Completed"),
    ]
    result = filter_events(events, INTERVAL)
    assert [event.id for event in result.events] == ["ok"]
    assert result.invalid == 2


def test_string_timestamps_are_parsed_without_mutating_input():
    original = Event("a", "2024-03-05T09:00:00Z", "Completed")
    result = filter_events([original], INTERVAL)
    assert original.timestamp == "2024-03-05T09:00:00Z"
    assert result.events[0].timestamp.hour == 9


def test_parse_timestamp():
    assert parse_timestamp("2024-03-05T10:00:00") == datetime(2024, 3, 5, 10, 0)
    assert parse_timestamp("2024-03-05T10:00:00+02:00").utcoffset().total_seconds() == 7200
    assert parse_timestamp("garbage") is None
    assert parse_timestamp(12345) is None
