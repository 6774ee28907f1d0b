"""Core data schema for booking analytics."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union


class RangeKind(str, Enum):
    """Period granularity selected on the dashboard."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"


CURRENT = "current"
COMPARISON = "comparison"

COMPARE_NONE = "none"
COMPARE_PREVIOUS = "previous_period"
COMPARE_CUSTOM = "custom"
COMPARE_MODES = (COMPARE_NONE, COMPARE_PREVIOUS, COMPARE_CUSTOM)


@dataclass(frozen=True)
class Event:
    """Appointment or stock event as fetched from the data source.

    ``timestamp`` is a ``datetime`` once parsed; adapters keep the raw string
    when it cannot be parsed so the filter can count it as invalid.
    """

    id: str
    timestamp: Union[datetime, str, None]
    status: str
    category: Optional[str] = None


@dataclass(frozen=True)
class Interval:
    start: datetime
    end: datetime


@dataclass(frozen=True)
class Bucket:
    label: str
    count: int


@dataclass(frozen=True)
class BucketSeries:
    """Dense chart series for one interval."""

    hourly: tuple[Bucket, ...] = ()
    daily: tuple[Bucket, ...] = ()
    weekly: tuple[Bucket, ...] = ()
    monthly: tuple[Bucket, ...] = ()


@dataclass(frozen=True)
class PeriodQuery:
    """Explicit parameters for one period; ``start``/``end`` only matter for weeks."""

    anchor: Union[datetime, date, None] = None
    start: Union[datetime, date, None] = None
    end: Union[datetime, date, None] = None


@dataclass(frozen=True)
class PeriodStats:
    total: int
    status_distribution: dict[str, int]
    bucket_series: BucketSeries
    avg_per_day: float
    predicted_total: float
    interval: Interval
    range_kind: str = RangeKind.DAY.value
    category_distribution: dict[str, int] = field(default_factory=dict)
    invalid_records: int = 0


@dataclass(frozen=True)
class ComparisonResult:
    current: PeriodStats
    baseline: Optional[PeriodStats]
    delta_percent: dict[str, Optional[float]]


@dataclass(frozen=True)
class TrendForecast:
    """Linear trend fitted over daily counts and projected to the interval end."""

    slope: float
    intercept: float
    points: tuple[tuple[str, float], ...]
    observed_days: int
    projected_total: float
