"""Demo script for booking-analytics."""

import sys
from datetime import datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from booking_analytics.adapters.csv_adapter import parse
from booking_analytics.comparator import compare
from booking_analytics.presenters import format_delta, period_label
from booking_analytics.schema import PeriodQuery


def main() -> None:
    events = parse(str(Path(__file__).with_name("sample_appointments.csv")))
    now = datetime(2024, 3, 20, 12, 0)
    result = compare(events, "month", PeriodQuery(anchor=now), compare_mode="previous_period", now=now)

    current, baseline = result.current, result.baseline
    print("Current:", period_label("month", current.interval), current.total, current.status_distribution)
    print("Baseline:", period_label("month", baseline.interval), baseline.total, baseline.status_distribution)
    print("Average per day:", current.avg_per_day, "Predicted total:", current.predicted_total)
    print("Deltas:", {metric: format_delta(value) for metric, value in result.delta_percent.items()})


if __name__ == "__main__":
    main()
