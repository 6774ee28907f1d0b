"""Linear trend forecast over the daily bucket series."""

from __future__ import annotations

from datetime import datetime

import numpy as np
from sklearn.linear_model import LinearRegression

from booking_analytics.aggregator import round1
from booking_analytics.schema import PeriodStats, TrendForecast


def _observed_day_count(stats: PeriodStats, now: datetime) -> int:
    today = now.strftime("%Y-%m-%d")
    return sum(1 for bucket in stats.bucket_series.daily if bucket.label <= today)


def forecast_trend(stats: PeriodStats, now: datetime) -> TrendForecast:
    """Fit counts of the days up to ``now`` and project the rest of the interval."""

    daily = stats.bucket_series.daily
    if not daily:
        return TrendForecast(slope=0.0, intercept=0.0, points=(), observed_days=0, projected_total=0.0)

    observed = _observed_day_count(stats, now)
    counts = np.asarray([bucket.count for bucket in daily], dtype=float)
    X = np.arange(len(daily), dtype=float).reshape(-1, 1)

    if observed >= 2:
        model = LinearRegression()
        model.fit(X[:observed], counts[:observed])
        slope = float(model.coef_[0])
        intercept = float(model.intercept_)
        fitted = model.predict(X)
    else:
        slope = 0.0
        intercept = float(counts[:observed].mean()) if observed else 0.0
        fitted = np.full(len(daily), intercept)

    # Already-booked future events are a floor for the projection.
    projected = np.maximum(counts, np.clip(fitted, 0.0, None))
    values = np.where(np.arange(len(daily)) < observed, counts, projected)
    points = tuple((bucket.label, round1(float(value))) for bucket, value in zip(daily, values))
    projected_total = round1(float(values.sum()))

    return TrendForecast(
        slope=slope,
        intercept=intercept,
        points=points,
        observed_days=observed,
        projected_total=projected_total,
    )
