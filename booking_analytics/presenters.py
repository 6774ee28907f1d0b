"""View-model builders for the presentation layer."""

from __future__ import annotations

import math
from typing import Any, Optional

from booking_analytics.periods import normalize_range_kind
from booking_analytics.schema import (
    BucketSeries,
    ComparisonResult,
    Interval,
    PeriodStats,
    RangeKind,
    TrendForecast,
)

NO_BASELINE = "+100%"


def format_delta(value: Optional[float]) -> str:
    """Render a delta percent; ``None`` means there was no non-zero baseline."""

    if value is None:
        return NO_BASELINE
    value = round(value, 1) + 0.0  # adding 0.0 turns -0.0 into 0.0
    sign = "+" if value > 0 else ""
    return f"{sign}{value:.1f}%"


def status_share(stats: PeriodStats) -> dict[str, int]:
    """Whole-number percent of the period total for each observed status."""

    if not stats.total:
        return {}
    return {
        status: int(math.floor(count / stats.total * 100 + 0.5))
        for status, count in stats.status_distribution.items()
    }


def _long_date(moment) -> str:
    return f"{moment.strftime('%B')} {moment.day}, {moment.year}"


def _short_date(moment) -> str:
    return f"{moment.strftime('%b')} {moment.day}"


def period_label(range_kind, interval: Interval) -> str:
    kind = normalize_range_kind(range_kind)
    start = interval.start
    if kind == RangeKind.WEEK.value:
        return f"{_short_date(start)} - {_short_date(interval.end)}, {interval.end.year}"
    if kind == RangeKind.MONTH.value:
        return start.strftime("%B %Y")
    if kind == RangeKind.YEAR.value:
        return str(start.year)
    return _long_date(start)


def _series_view(series: BucketSeries) -> dict[str, list[dict[str, Any]]]:
    return {
        "hourly": [{"hour": b.label, "count": b.count} for b in series.hourly],
        "daily": [{"date": b.label, "count": b.count} for b in series.daily],
        "weekly": [{"week": b.label, "count": b.count} for b in series.weekly],
        "monthly": [{"month": b.label, "count": b.count} for b in series.monthly],
    }


def stats_to_view(stats: PeriodStats) -> dict[str, Any]:
    return {
        "total": stats.total,
        "statusDistribution": dict(stats.status_distribution),
        "statusShare": status_share(stats),
        "categoryDistribution": dict(stats.category_distribution),
        "bucketSeries": _series_view(stats.bucket_series),
        "avgPerDay": stats.avg_per_day,
        "predictedTotal": stats.predicted_total,
        "interval": {
            "start": stats.interval.start.isoformat(),
            "end": stats.interval.end.isoformat(),
        },
        "label": period_label(stats.range_kind, stats.interval),
        "invalidRecords": stats.invalid_records,
    }


_VIEW_KEYS = {"total": "total", "avg_per_day": "avgPerDay", "predicted_total": "predictedTotal"}


def comparison_to_view(result: ComparisonResult, trend: Optional[TrendForecast] = None) -> dict[str, Any]:
    """Plain-dict view of a comparison, with formatted deltas when a baseline exists."""

    deltas = {_VIEW_KEYS.get(key, key): value for key, value in result.delta_percent.items()}
    view: dict[str, Any] = {
        "current": stats_to_view(result.current),
        "baseline": stats_to_view(result.baseline) if result.baseline is not None else None,
        "deltaPercent": deltas,
        "deltaDisplay": {},
    }
    if result.baseline is not None:
        view["deltaDisplay"] = {key: format_delta(value) for key, value in deltas.items()}

    if trend is not None:
        view["trend"] = {
            "slope": trend.slope,
            "intercept": trend.intercept,
            "observedDays": trend.observed_days,
            "projectedTotal": trend.projected_total,
            "points": [{"date": label, "value": value} for label, value in trend.points],
        }
    return view
