"""Field mapping shared by the file adapters."""

from __future__ import annotations

import logging

from booking_analytics.filtering import parse_timestamp
from booking_analytics.schema import Event

logger = logging.getLogger(__name__)

_ALIASES = {
    "id": ("id", "_id"),
    "timestamp": ("timestamp", "appointmentDateTime"),
    "status": ("status",),
}


def _lookup(record: dict, field: str):
    for name in _ALIASES[field]:
        value = record.get(name)
        if value not in (None, ""):
            return value
    return None


def build_event(record: dict, location: str) -> Event:
    """Map one raw record to an ``Event``; unparseable timestamps are kept as text."""

    values = {field: _lookup(record, field) for field in _ALIASES}
    missing = sorted(field for field, value in values.items() if value is None)
    if missing:
        raise ValueError(f"{location}: missing required fields {missing}")

    raw_timestamp = values["timestamp"]
    timestamp = parse_timestamp(raw_timestamp)
    if timestamp is None:
        logger.debug("%s: keeping unparseable timestamp %r", location, raw_timestamp)
        timestamp = str(raw_timestamp)

    category_raw = record.get("category")
    category = str(category_raw).strip() if category_raw else None

    return Event(
        id=str(values["id"]).strip(),
        timestamp=timestamp,
        status=str(values["status"]).strip(),
        category=category or None,
    )
