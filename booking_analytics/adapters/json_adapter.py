"""JSON adapter for appointment and stock events."""

from __future__ import annotations

import json

from booking_analytics.adapters.fields import build_event
from booking_analytics.schema import Event


def parse(file_path: str) -> list[Event]:
    """Parse a JSON list, or an API page with a ``results`` list, into events."""

    with open(file_path, encoding="utf-8") as handle:
        payload = json.load(handle)

    if isinstance(payload, dict) and isinstance(payload.get("results"), list):
        payload = payload["results"]
    if not isinstance(payload, list):
        raise ValueError("JSON payload must be a list of objects")

    events = []
    for index, item in enumerate(payload, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"Item {index}: expected an object")
        events.append(build_event(item, f"Item {index}"))
    return events
