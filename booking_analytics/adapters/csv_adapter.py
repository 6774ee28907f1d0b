"""CSV adapter for appointment and stock events."""

from __future__ import annotations

import csv

from booking_analytics.adapters.fields import build_event
from booking_analytics.schema import Event


def parse(file_path: str) -> list[Event]:
    """Parse CSV file into a list of events."""

    with open(file_path, newline="", encoding="utf-8") as handle:
        reader = csv.DictReader(handle)
        if not reader.fieldnames:
            return []

        return [build_event(row, f"Row {row_number}") for row_number, row in enumerate(reader, start=2)]
