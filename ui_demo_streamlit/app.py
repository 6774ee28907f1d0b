"""Streamlit demo UI for booking-analytics."""

from __future__ import annotations

import tempfile
from datetime import date, datetime, time
from pathlib import Path
from typing import Any, Optional

from booking_analytics.adapters import csv_adapter, json_adapter
from booking_analytics.comparator import compare
from booking_analytics.config import configure_logging, load_config
from booking_analytics.presenters import comparison_to_view
from booking_analytics.schema import COMPARE_CUSTOM, COMPARE_MODES, COMPARE_NONE, PeriodQuery, RangeKind
from booking_analytics.trend import forecast_trend


RANGES = [kind.value for kind in RangeKind]
DEMO_DATASET = "examples/sample_appointments.csv"


def _parse_events_from_path(file_path: str) -> list:
    suffix = Path(file_path).suffix.lower()
    if suffix == ".csv":
        return csv_adapter.parse(file_path)
    if suffix == ".json":
        return json_adapter.parse(file_path)
    raise ValueError("Unsupported file type. Please use .csv or .json")


def _parse_uploaded(uploaded_file) -> list:
    suffix = Path(uploaded_file.name).suffix.lower()
    with tempfile.NamedTemporaryFile(delete=False, suffix=suffix) as handle:
        handle.write(uploaded_file.getbuffer())
        temp_path = handle.name
    return _parse_events_from_path(temp_path)


def _as_datetime(value: Optional[date]) -> Optional[datetime]:
    if value is None or isinstance(value, datetime):
        return value
    return datetime.combine(value, time.min)


def run_engine(events: list, params: dict, now: datetime, week_start: int) -> dict[str, Any]:
    """Run the analytics core for the selected parameters and return the view-model."""

    current = PeriodQuery(
        anchor=_as_datetime(params["anchor"]),
        start=_as_datetime(params.get("start")),
        end=_as_datetime(params.get("end")),
    )
    comparison = None
    if params["compare_mode"] == COMPARE_CUSTOM and params.get("compare_anchor") is not None:
        comparison = PeriodQuery(anchor=_as_datetime(params["compare_anchor"]))

    result = compare(
        events,
        params["range"],
        current,
        comparison,
        compare_mode=params["compare_mode"],
        now=now,
        week_start=week_start,
    )
    return comparison_to_view(result, trend=forecast_trend(result.current, now))


def main() -> None:
    import streamlit as st

    config = load_config()
    configure_logging(config)

    st.set_page_config(page_title="Booking Analytics Demo", layout="wide")
    st.title("Booking Analytics — Streamlit Demo")

    with st.sidebar:
        st.header("Controls")
        uploaded = st.file_uploader("Upload event export", type=["csv", "json"])
        use_demo = st.checkbox("Load demo dataset", value=True)
        range_kind = st.selectbox("Range", options=RANGES, index=RANGES.index(config.default_range))
        anchor = st.date_input("Select date", value=date(2024, 3, 20))
        start = end = None
        if range_kind == RangeKind.WEEK.value:
            start = st.date_input("Start date", value=date(2024, 3, 17))
            end = st.date_input("End date", value=date(2024, 3, 23))
            if end < start:
                st.warning("End date was before start; it will be adjusted to match start.")
                end = start
        compare_mode = st.selectbox("Compare with", options=list(COMPARE_MODES), index=COMPARE_MODES.index(config.compare_mode))
        compare_anchor = None
        if compare_mode == COMPARE_CUSTOM:
            compare_anchor = st.date_input("Compare date", value=date(2024, 2, 20))
        run = st.button("Run analytics", type="primary")

    if not run:
        st.info("Configure inputs in the sidebar and click **Run analytics**.")
        return

    try:
        if use_demo:
            events = csv_adapter.parse(DEMO_DATASET)
            data_source = f"demo dataset ({DEMO_DATASET})"
        elif uploaded is not None:
            events = _parse_uploaded(uploaded)
            data_source = f"uploaded file ({uploaded.name})"
        else:
            st.error("Please upload a CSV/JSON file or enable 'Load demo dataset'.")
            return

        params = {
            "range": range_kind,
            "anchor": anchor,
            "start": start,
            "end": end,
            "compare_mode": compare_mode,
            "compare_anchor": compare_anchor,
        }
        view = run_engine(events[: config.fetch_limit], params, now=datetime.now(), week_start=config.week_start)

        st.success(f"Loaded {len(events)} events from {data_source}.")
        current = view["current"]
        baseline = view["baseline"]
        if current["invalidRecords"]:
            st.warning(f"{current['invalidRecords']} event(s) had invalid timestamps and were skipped.")

        st.subheader(f"A) Summary — {current['label']}")
        c1, c2, c3 = st.columns(3)
        show_delta = compare_mode != COMPARE_NONE and baseline is not None
        c1.metric("Total", current["total"], view["deltaDisplay"].get("total") if show_delta else None)
        c2.metric("Average per day", current["avgPerDay"], view["deltaDisplay"].get("avgPerDay") if show_delta else None)
        c3.metric(
            "Predicted total",
            current["predictedTotal"],
            view["deltaDisplay"].get("predictedTotal") if show_delta else None,
        )
        if show_delta:
            st.caption(f"vs {baseline['label']}: {baseline['total']}")

        st.subheader("B) Status Distribution")
        st.bar_chart([{"status": s, "count": c} for s, c in current["statusDistribution"].items()], x="status", y="count")
        st.table(
            [
                {
                    "status": status,
                    "count": count,
                    "share": f"{current['statusShare'].get(status, 0)}%",
                    "delta": view["deltaDisplay"].get(f"status:{status}", "") if show_delta else "",
                }
                for status, count in current["statusDistribution"].items()
            ]
        )

        st.subheader("C) Timeline")
        series = current["bucketSeries"]
        if range_kind == RangeKind.DAY.value:
            st.bar_chart(series["hourly"], x="hour", y="count")
        else:
            st.line_chart(series["daily"], x="date", y="count")
            if range_kind == RangeKind.YEAR.value:
                st.bar_chart(series["monthly"], x="month", y="count")
            else:
                st.bar_chart(series["weekly"], x="week", y="count")

        st.subheader("D) Trend Forecast")
        trend = view["trend"]
        st.write(f"Projected total: {trend['projectedTotal']} (slope {trend['slope']:.3f} per day)")
        st.line_chart(trend["points"], x="date", y="value")

    except ValueError as exc:
        st.error(f"Input error: {exc}")


if __name__ == "__main__":
    main()
