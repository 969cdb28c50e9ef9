"""Recent and upcoming event listings."""

from __future__ import annotations

from collections.abc import Iterable
from datetime import datetime

from house_cup.core.enums import EventStatus
from house_cup.core.models import Event

_UPCOMING = (EventStatus.SCHEDULED, EventStatus.IN_PROGRESS)


def recent_events(events: Iterable[Event], limit: int | None = None) -> list[Event]:
    """Completed events, newest ``end_time`` first.

    Events without an end time follow the timed ones, alphabetically.
    """
    completed = [e for e in events if e.status == EventStatus.COMPLETED]
    timed = sorted(
        (e for e in completed if e.end_time is not None),
        key=lambda e: (-_timestamp(e.end_time), e.name, e.id),
    )
    untimed = sorted(
        (e for e in completed if e.end_time is None),
        key=lambda e: (e.name, e.id),
    )
    ordered = timed + untimed
    return ordered if limit is None else ordered[:limit]


def upcoming_events(events: Iterable[Event]) -> list[Event]:
    """Scheduled and in-progress events, earliest ``start_time`` first.

    Events without a start time follow the timed ones, alphabetically.
    """
    pending = [e for e in events if e.status in _UPCOMING]
    timed = sorted(
        (e for e in pending if e.start_time is not None),
        key=lambda e: (_timestamp(e.start_time), e.name, e.id),
    )
    untimed = sorted(
        (e for e in pending if e.start_time is None),
        key=lambda e: (e.name, e.id),
    )
    return timed + untimed


def _timestamp(value: datetime | None) -> float:
    # Naive datetimes are read as local time by ``timestamp()``; hosts are
    # expected to pass timezone-aware values.
    return value.timestamp() if value is not None else 0.0
