"""Period resolution for analytics queries."""

from __future__ import annotations

import calendar
from datetime import date, datetime, time, timedelta
from typing import Optional, Union

from dateutil.relativedelta import relativedelta

from booking_analytics.schema import COMPARISON, Interval, RangeKind

MONDAY = 0
SUNDAY = 6

DateLike = Union[datetime, date]


def _as_datetime(value: DateLike) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def start_of_day(value: DateLike) -> datetime:
    return _as_datetime(value).replace(hour=0, minute=0, second=0, microsecond=0)


def end_of_day(value: DateLike) -> datetime:
    return _as_datetime(value).replace(hour=23, minute=59, second=59, microsecond=999999)


def start_of_week(value: DateLike, week_start: int = SUNDAY) -> datetime:
    moment = start_of_day(value)
    return moment - timedelta(days=(moment.weekday() - week_start) % 7)


def end_of_week(value: DateLike, week_start: int = SUNDAY) -> datetime:
    return end_of_day(start_of_week(value, week_start) + timedelta(days=6))


def start_of_month(value: DateLike) -> datetime:
    return start_of_day(value).replace(day=1)


def end_of_month(value: DateLike) -> datetime:
    moment = _as_datetime(value)
    last_day = calendar.monthrange(moment.year, moment.month)[1]
    return end_of_day(moment.replace(day=last_day))


def start_of_year(value: DateLike) -> datetime:
    return start_of_day(value).replace(month=1, day=1)


def end_of_year(value: DateLike) -> datetime:
    return end_of_day(_as_datetime(value).replace(month=12, day=31))


def days_between(start: DateLike, end: DateLike) -> int:
    """Whole days from ``start`` to ``end``, truncated toward zero."""

    seconds = (_as_datetime(end) - _as_datetime(start)).total_seconds()
    return int(seconds / 86400)


def normalize_range_kind(range_kind) -> Optional[str]:
    """Lower-cased range kind value, or ``None`` when it is not a string."""

    if isinstance(range_kind, RangeKind):
        return range_kind.value
    if isinstance(range_kind, str):
        return range_kind.strip().lower()
    return None


def _explicit_interval(start: DateLike, end: DateLike) -> Interval:
    # An end before the start collapses to the start day.
    if _as_datetime(end) < start_of_day(start):
        end = start
    return Interval(start_of_day(start), end_of_day(end))


def resolve(
    range_kind,
    mode: str,
    anchor: Optional[DateLike],
    explicit_start: Optional[DateLike] = None,
    explicit_end: Optional[DateLike] = None,
    now: Optional[datetime] = None,
    week_start: int = SUNDAY,
) -> Interval:
    """Resolve a range kind and mode into a concrete interval.

    Current-mode weeks use the caller's explicit bounds; comparison-mode weeks
    snap to the calendar week of the anchor. Unknown kinds (or a missing
    anchor) fall back to today for the current period and yesterday for the
    comparison period.
    """

    kind = normalize_range_kind(range_kind)

    if anchor is not None:
        if kind == RangeKind.DAY.value:
            return Interval(start_of_day(anchor), end_of_day(anchor))
        if kind == RangeKind.WEEK.value:
            if mode == COMPARISON:
                return Interval(start_of_week(anchor, week_start), end_of_week(anchor, week_start))
            start = explicit_start if explicit_start is not None else start_of_week(anchor, week_start)
            end = explicit_end if explicit_end is not None else end_of_week(anchor, week_start)
            return _explicit_interval(start, end)
        if kind == RangeKind.MONTH.value:
            return Interval(start_of_month(anchor), end_of_month(anchor))
        if kind == RangeKind.YEAR.value:
            return Interval(start_of_year(anchor), end_of_year(anchor))
    elif kind == RangeKind.WEEK.value and mode != COMPARISON and explicit_start and explicit_end:
        return _explicit_interval(explicit_start, explicit_end)

    today = now if now is not None else datetime.now()
    if mode == COMPARISON:
        today = today - timedelta(days=1)
    return Interval(start_of_day(today), end_of_day(today))


def previous_anchor(range_kind, anchor: DateLike) -> DateLike:
    """Shift ``anchor`` back by one unit of ``range_kind``."""

    kind = normalize_range_kind(range_kind)
    if kind == RangeKind.WEEK.value:
        return anchor - timedelta(days=7)
    if kind == RangeKind.MONTH.value:
        return anchor - relativedelta(months=1)
    if kind == RangeKind.YEAR.value:
        return anchor - relativedelta(years=1)
    return anchor - timedelta(days=1)
