"""Interval membership filtering for raw events."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import date, datetime, time
from typing import Iterable, Optional

from booking_analytics.schema import Event, Interval

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterResult:
    events: list[Event]
    invalid: int = 0


def parse_timestamp(value) -> Optional[datetime]:
    """Parse an event timestamp, returning ``None`` when it is unusable."""

    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        return None


def align_to(moment: datetime, reference: datetime) -> datetime:
    """Bring ``moment`` into the same naive/aware frame as ``reference``."""

    if reference.tzinfo is not None:
        if moment.tzinfo is None:
            return moment.replace(tzinfo=reference.tzinfo)
        return moment.astimezone(reference.tzinfo)
    if moment.tzinfo is not None:
        return moment.replace(tzinfo=None)
    return moment


def filter_events(events: Iterable[Event], interval: Interval) -> FilterResult:
    """Select events with ``start <= timestamp <= end``, counting unparseable ones."""

    selected: list[Event] = []
    invalid = 0
    for event in events:
        moment = parse_timestamp(event.timestamp)
        if moment is None:
            invalid += 1
            logger.debug("Skipping event %s: invalid timestamp %r", event.id, event.timestamp)
            continue

        moment = align_to(moment, interval.start)
        if interval.start <= moment <= interval.end:
            selected.append(event if moment is event.timestamp else replace(event, timestamp=moment))

    if invalid:
        logger.warning("Skipped %d event(s) with invalid timestamps", invalid)
    return FilterResult(events=selected, invalid=invalid)
