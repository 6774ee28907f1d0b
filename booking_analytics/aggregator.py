"""Period summary metrics: totals, distributions, daily average and forecast."""

from __future__ import annotations

import math
from collections import Counter
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional

from booking_analytics.buckets import bucketize
from booking_analytics.filtering import filter_events
from booking_analytics.periods import SUNDAY, days_between, normalize_range_kind, resolve
from booking_analytics.schema import Event, Interval, PeriodQuery, PeriodStats, RangeKind


def round1(value: float) -> float:
    """Round to one decimal place, halves away from zero; non-finite values become 0.0."""

    if value is None or not math.isfinite(value):
        return 0.0
    return float(Decimal(repr(float(value))).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def total_days(interval: Interval) -> int:
    return max(1, days_between(interval.start, interval.end) + 1)


def aggregate(
    events: list[Event],
    interval: Interval,
    range_kind=RangeKind.DAY,
    now: Optional[datetime] = None,
    invalid_records: int = 0,
) -> PeriodStats:
    """Compute summary stats for events already filtered to ``interval``.

    The forecast extrapolates with the unrounded daily average; only the
    reported ``avg_per_day`` is rounded.
    """

    total = len(events)
    status_distribution = dict(Counter(event.status for event in events))
    category_distribution = dict(Counter(event.category for event in events if event.category))

    avg_raw = total / total_days(interval)

    moment = now if now is not None else datetime.now(interval.end.tzinfo)
    if (moment.tzinfo is None) != (interval.end.tzinfo is None):
        moment = moment.replace(tzinfo=interval.end.tzinfo)
    days_remaining = days_between(moment, interval.end)

    kind = normalize_range_kind(range_kind) or str(range_kind)
    return PeriodStats(
        total=total,
        status_distribution=status_distribution,
        bucket_series=bucketize(events, interval, kind),
        avg_per_day=round1(avg_raw),
        predicted_total=round1(total + avg_raw * days_remaining),
        interval=interval,
        range_kind=kind,
        category_distribution=category_distribution,
        invalid_records=invalid_records,
    )


def compute_period_stats(
    events: Iterable[Event],
    range_kind,
    mode: str,
    query: PeriodQuery,
    now: Optional[datetime] = None,
    week_start: int = SUNDAY,
) -> PeriodStats:
    """Resolve, filter and aggregate one period in a single call."""

    interval = resolve(range_kind, mode, query.anchor, query.start, query.end, now=now, week_start=week_start)
    filtered = filter_events(events, interval)
    return aggregate(filtered.events, interval, range_kind, now=now, invalid_records=filtered.invalid)
