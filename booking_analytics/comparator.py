"""Current vs comparison period evaluator."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, Optional

from booking_analytics.aggregator import compute_period_stats, round1
from booking_analytics.periods import SUNDAY, previous_anchor
from booking_analytics.schema import (
    COMPARE_CUSTOM,
    COMPARE_NONE,
    COMPARE_PREVIOUS,
    COMPARISON,
    CURRENT,
    ComparisonResult,
    Event,
    PeriodQuery,
    PeriodStats,
)

SCALAR_METRICS = ("total", "avg_per_day", "predicted_total")


def percent_change(old: Optional[float], new: float) -> Optional[float]:
    """Relative change in percent, ``None`` when there is no non-zero baseline."""

    if old is None or old == 0:
        return None
    return round1((new - old) / old * 100.0)


def delta_percent(current: PeriodStats, baseline: Optional[PeriodStats]) -> dict[str, Optional[float]]:
    """Per-metric deltas, including ``status:<label>`` for statuses seen in either period."""

    deltas: dict[str, Optional[float]] = {}
    for metric in SCALAR_METRICS:
        old = getattr(baseline, metric) if baseline is not None else None
        deltas[metric] = percent_change(old, getattr(current, metric))

    statuses = list(current.status_distribution)
    if baseline is not None:
        statuses += [status for status in baseline.status_distribution if status not in current.status_distribution]

    for status in statuses:
        old = baseline.status_distribution.get(status, 0) if baseline is not None else None
        deltas[f"status:{status}"] = percent_change(old, current.status_distribution.get(status, 0))
    return deltas


def compare(
    events: Iterable[Event],
    range_kind,
    current: PeriodQuery,
    comparison: Optional[PeriodQuery] = None,
    compare_mode: str = COMPARE_CUSTOM,
    now: Optional[datetime] = None,
    week_start: int = SUNDAY,
) -> ComparisonResult:
    """Aggregate the current period and, when requested, a baseline period."""

    events = list(events)
    current_stats = compute_period_stats(events, range_kind, CURRENT, current, now=now, week_start=week_start)

    if comparison is None and compare_mode == COMPARE_PREVIOUS and current.anchor is not None:
        comparison = PeriodQuery(anchor=previous_anchor(range_kind, current.anchor))

    baseline = None
    if comparison is not None and compare_mode != COMPARE_NONE:
        baseline = compute_period_stats(events, range_kind, COMPARISON, comparison, now=now, week_start=week_start)

    return ComparisonResult(
        current=current_stats,
        baseline=baseline,
        delta_percent=delta_percent(current_stats, baseline),
    )
