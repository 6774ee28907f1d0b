"""Dense, zero-filled time buckets for charting."""

from __future__ import annotations

import calendar
import logging
from datetime import datetime, timedelta

from booking_analytics.filtering import align_to, parse_timestamp
from booking_analytics.periods import normalize_range_kind
from booking_analytics.schema import Bucket, BucketSeries, Event, Interval, RangeKind

logger = logging.getLogger(__name__)


def hour_key(moment: datetime) -> str:
    return f"{moment.hour}:00"


def day_key(moment) -> str:
    return moment.strftime("%Y-%m-%d")


def week_key(moment) -> str:
    return f"Week {moment.isocalendar()[1]}"


def month_key(moment) -> str:
    return f"{calendar.month_name[moment.month]} {moment.year}"


def _to_buckets(counts: dict[str, int]) -> tuple[Bucket, ...]:
    return tuple(Bucket(label=label, count=count) for label, count in counts.items())


def bucketize(events: list[Event], interval: Interval, range_kind) -> BucketSeries:
    """Count events per hour (day ranges) and per day, week and month of the interval.

    Every bucket is created at zero before counting, so series never have gaps.
    Events must already be filtered to ``interval``.
    """

    is_day = normalize_range_kind(range_kind) == RangeKind.DAY.value

    hourly: dict[str, int] = {}
    if is_day:
        hourly = {f"{hour}:00": 0 for hour in range(24)}

    daily: dict[str, int] = {}
    weekly: dict[str, int] = {}
    monthly: dict[str, int] = {}

    current = interval.start.date()
    last = interval.end.date()
    while current <= last:
        daily[day_key(current)] = 0
        weekly.setdefault(week_key(current), 0)
        monthly.setdefault(month_key(current), 0)
        current += timedelta(days=1)

    dropped = 0
    for event in events:
        moment = parse_timestamp(event.timestamp)
        if moment is None:
            dropped += 1
            continue
        moment = align_to(moment, interval.start)

        keys = [(daily, day_key(moment)), (weekly, week_key(moment)), (monthly, month_key(moment))]
        if is_day:
            keys.append((hourly, hour_key(moment)))

        for counts, key in keys:
            if key in counts:
                counts[key] += 1
            else:
                dropped += 1

    if dropped:
        logger.warning("Dropped %d bucket increment(s) outside %s..%s", dropped, interval.start, interval.end)

    return BucketSeries(
        hourly=_to_buckets(hourly),
        daily=_to_buckets(daily),
        weekly=_to_buckets(weekly),
        monthly=_to_buckets(monthly),
    )
