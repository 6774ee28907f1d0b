from datetime import date, datetime

from booking_analytics.periods import MONDAY, days_between, previous_anchor, resolve
from booking_analytics.schema import COMPARISON, CURRENT, RangeKind

END_OF_DAY = (23, 59, 59, 999999)


def _end(year, month, day):
    return datetime(year, month, day, *END_OF_DAY)


def test_day_range_snaps_to_whole_day():
    interval = resolve("day", CURRENT, datetime(2024, 3, 5, 10, 30))
    assert interval.start == datetime(2024, 3, 5)
    assert interval.end == _end(2024, 3, 5)


def test_current_week_uses_explicit_bounds():
    interval = resolve(
        RangeKind.WEEK,
        CURRENT,
        datetime(2024, 3, 6),
        explicit_start=datetime(2024, 3, 6, 15, 0),
        explicit_end=date(2024, 3, 9),
    )
    assert interval.start == datetime(2024, 3, 6)
    assert interval.end == _end(2024, 3, 9)


def test_comparison_week_snaps_to_calendar_week():
    interval = resolve(
        "week",
        COMPARISON,
        datetime(2024, 3, 6),
        explicit_start=datetime(2024, 3, 6),
        explicit_end=datetime(2024, 3, 7),
    )
    assert interval.start == datetime(2024, 3, 3)
    assert interval.end == _end(2024, 3, 9)


def test_comparison_week_with_monday_start():
    interval = resolve("week", COMPARISON, datetime(2024, 3, 6), week_start=MONDAY)
    assert interval.start == datetime(2024, 3, 4)
    assert interval.end == _end(2024, 3, 10)


def test_month_and_year_ranges():
    month = resolve("month", CURRENT, datetime(2024, 2, 14))
    assert month.start == datetime(2024, 2, 1)
    assert month.end == _end(2024, 2, 29)

    year = resolve("year", COMPARISON, date(2023, 7, 1))
    assert year.start == datetime(2023, 1, 1)
    assert year.end == _end(2023, 12, 31)


def test_unknown_kind_falls_back_to_today_and_yesterday():
    now = datetime(2024, 3, 5, 12, 0)
    current = resolve("quarter", CURRENT, datetime(2020, 1, 1), now=now)
    comparison = resolve("quarter", COMPARISON, datetime(2020, 1, 1), now=now)
    assert (current.start, current.end) == (datetime(2024, 3, 5), _end(2024, 3, 5))
    assert (comparison.start, comparison.end) == (datetime(2024, 3, 4), _end(2024, 3, 4))


def test_days_between_truncates_toward_zero():
    assert days_between(datetime(2024, 3, 1), _end(2024, 3, 1)) == 0
    assert days_between(datetime(2024, 2, 1), _end(2024, 2, 29)) == 28
    assert days_between(datetime(2024, 3, 20), _end(2024, 2, 29)) == -19


def test_previous_anchor_shifts_one_unit():
    assert previous_anchor("day", datetime(2024, 3, 1)) == datetime(2024, 2, 29)
    assert previous_anchor("week", datetime(2024, 3, 6)) == datetime(2024, 2, 28)
    assert previous_anchor("month", datetime(2024, 3, 31)) == datetime(2024, 2, 29)
    assert previous_anchor("month", datetime(2024, 1, 15)) == datetime(2023, 12, 15)
    assert previous_anchor("year", datetime(2024, 2, 29)) == datetime(2023, 2, 28)


def test_previous_anchor_clamps_to_month_end():
    assert previous_anchor("month", datetime(2024, 5, 31)) == datetime(2024, 4, 30)
    assert previous_anchor("Month", date(2023, 3, 29)) == date(2023, 2, 28)
    assert previous_anchor("year", date(2025, 1, 31)) == date(2024, 1, 31)


def test_reversed_week_bounds_collapse_to_start_day():
    interval = resolve(
        "week",
        CURRENT,
        datetime(2024, 3, 6),
        explicit_start=datetime(2024, 3, 9),
        explicit_end=datetime(2024, 3, 4),
    )
    assert interval.start == datetime(2024, 3, 9)
    assert interval.end == _end(2024, 3, 9)
    assert interval.start <= interval.end

    without_anchor = resolve("week", CURRENT, None, explicit_start=date(2024, 3, 9), explicit_end=date(2024, 3, 4))
    assert without_anchor == interval


def test_range_kind_is_case_insensitive():
    assert resolve(" Month ", CURRENT, datetime(2024, 2, 14)) == resolve("month", CURRENT, datetime(2024, 2, 14))
