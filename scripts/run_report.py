"""Run a period analytics report from a CSV/JSON event export."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from datetime import date, datetime
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

from booking_analytics.adapters import csv_adapter, json_adapter
from booking_analytics.comparator import compare
from booking_analytics.config import configure_logging, load_config
from booking_analytics.presenters import comparison_to_view
from booking_analytics.schema import COMPARE_MODES, PeriodQuery, RangeKind
from booking_analytics.trend import forecast_trend

logger = logging.getLogger("run_report")


def _load_events(path: Path):
    suffix = path.suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(str(path))
    if suffix == ".json":
        return json_adapter.parse(str(path))
    raise ValueError("Unsupported input format, expected .csv or .json")


def _parse_date(value: str | None):
    if value is None:
        return None
    try:
        return datetime.fromisoformat(value)
    except ValueError as exc:
        raise ValueError(f"Invalid date '{value}', expected ISO format") from exc


def main() -> None:
    config = load_config()
    configure_logging(config)

    parser = argparse.ArgumentParser(description="Run booking-analytics period report")
    parser.add_argument("--data", required=True, help="Path to CSV/JSON events file")
    parser.add_argument("--range", default=config.default_range, choices=[kind.value for kind in RangeKind])
    parser.add_argument("--anchor", help="Anchor date (ISO), defaults to today")
    parser.add_argument("--start", help="Week start date (ISO), week range only")
    parser.add_argument("--end", help="Week end date (ISO), week range only")
    parser.add_argument("--compare-mode", default=config.compare_mode, choices=COMPARE_MODES)
    parser.add_argument("--compare-anchor", help="Comparison anchor date (ISO)")
    parser.add_argument("--now", help="Current instant (ISO), defaults to the wall clock")
    args = parser.parse_args()

    try:
        now = _parse_date(args.now) or datetime.now()
        anchor = _parse_date(args.anchor) or now
        current = PeriodQuery(anchor=anchor, start=_parse_date(args.start), end=_parse_date(args.end))
        compare_anchor = _parse_date(args.compare_anchor)
        comparison = PeriodQuery(anchor=compare_anchor) if compare_anchor is not None else None

        events = _load_events(Path(args.data))
    except ValueError as exc:
        parser.error(str(exc))

    if len(events) > config.fetch_limit:
        logger.warning("Dataset has %d events, only the first %d are analysed", len(events), config.fetch_limit)
        events = events[: config.fetch_limit]

    result = compare(
        events,
        args.range,
        current,
        comparison,
        compare_mode=args.compare_mode,
        now=now,
        week_start=config.week_start,
    )
    report = comparison_to_view(result, trend=forecast_trend(result.current, now))
    report["generatedAt"] = now.isoformat()
    report["anchor"] = anchor.isoformat() if isinstance(anchor, (date, datetime)) else None

    print(json.dumps(report, indent=2))


if __name__ == "__main__":
    main()
