from datetime import date, datetime
from pathlib import Path

from booking_analytics.adapters.csv_adapter import parse
from booking_analytics.periods import SUNDAY
from ui_demo_streamlit.app import run_engine

SAMPLE = Path(__file__).resolve().parents[1] / "examples" / "sample_appointments.csv"


def test_run_engine_previous_month():
    events = parse(str(SAMPLE))
    params = {"range": "month", "anchor": date(2024, 3, 20), "compare_mode": "previous_period"}
    view = run_engine(events, params, now=datetime(2024, 3, 20, 12, 0), week_start=SUNDAY)

    assert view["current"]["total"] == 10
    assert view["current"]["invalidRecords"] == 1
    assert view["baseline"]["total"] == 6
    assert view["deltaPercent"]["total"] == 66.7
    assert view["deltaDisplay"]["total"] == "+66.7%"
    assert len(view["trend"]["points"]) == 31


def test_run_engine_custom_week():
    events = parse(str(SAMPLE))
    params = {
        "range": "week",
        "anchor": date(2024, 3, 5),
        "start": date(2024, 3, 4),
        "end": date(2024, 3, 8),
        "compare_mode": "custom",
        "compare_anchor": date(2024, 2, 14),
    }
    view = run_engine(events, params, now=datetime(2024, 3, 20), week_start=SUNDAY)

    assert view["current"]["total"] == 4
    assert view["current"]["label"] == "Mar 4 - Mar 8, 2024"
    assert view["baseline"]["label"] == "Feb 11 - Feb 17, 2024"
    assert view["baseline"]["total"] == 1
    assert view["deltaPercent"]["total"] == 300.0
