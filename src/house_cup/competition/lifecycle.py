"""Event status transitions.

Events are created ``scheduled``; they move ``scheduled -> in-progress ->
completed`` or straight ``scheduled -> completed``.
Completion happens only through a successful result commit; nothing leaves
``completed``.  Re-opening an event is a host decision: it stores a new
provisional sheet and recommits, and the next aggregation reflects it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from datetime import datetime

from house_cup.core.config import ScoringConfig
from house_cup.core.enums import EventStatus, EventType
from house_cup.core.errors import EventTransitionError
from house_cup.core.models import Event, EventResult, ScoringSchedule
from house_cup.validation.results import ResultValidator
from house_cup.validation.roster import validate_schedule

logger = logging.getLogger(__name__)

_VALID_TRANSITIONS: dict[EventStatus, frozenset[EventStatus]] = {
    EventStatus.SCHEDULED: frozenset(
        {EventStatus.IN_PROGRESS, EventStatus.COMPLETED}
    ),
    EventStatus.IN_PROGRESS: frozenset({EventStatus.COMPLETED}),
    # Terminal
    EventStatus.COMPLETED: frozenset(),
}


def can_transition(current: EventStatus, requested: EventStatus) -> bool:
    return requested in _VALID_TRANSITIONS.get(current, frozenset())


def _check_transition(event: Event, requested: EventStatus) -> None:
    if not can_transition(event.status, requested):
        raise EventTransitionError(event.id, event.status.value, requested.value)


def schedule_event(
    event_id: str,
    name: str,
    type: EventType,
    category_id: str,
    *,
    scoring: ScoringSchedule | None = None,
    config: ScoringConfig | None = None,
    start_time: datetime | None = None,
) -> Event:
    """Create a new ``scheduled`` event.

    Without an explicit *scoring* schedule the event gets the configured
    placement points for its category and type.

    Raises:
        ScheduleError: the schedule is empty or has invalid entries.
    """
    if scoring is None:
        scoring = (config or ScoringConfig()).schedule_for(category_id, type)
    validate_schedule(scoring)
    return Event(
        id=event_id,
        name=name,
        type=type,
        category_id=category_id,
        scoring=scoring,
        start_time=start_time,
    )


def start_event(event: Event, started_at: datetime | None = None) -> Event:
    """Move a scheduled event to ``in-progress``."""
    _check_transition(event, EventStatus.IN_PROGRESS)
    return event.model_copy(update={
        "status": EventStatus.IN_PROGRESS,
        "start_time": started_at or event.start_time,
    })


def complete_event(
    event: Event,
    provisional: Iterable[EventResult],
    *,
    validator: ResultValidator | None = None,
    completed_at: datetime | None = None,
) -> Event:
    """Validate *provisional* and return the event as completed.

    Raises:
        EventTransitionError: the event is already completed.
        ResultValidationError: the sheet failed validation; the event keeps
            its previous status and the host keeps the provisional sheet.
    """
    _check_transition(event, EventStatus.COMPLETED)
    validator = validator or ResultValidator()
    outcome = validator.validate(event.scoring, provisional)
    committed = outcome.unwrap()

    logger.info(
        "Event %s completed with %d placements",
        event.id,
        len(committed),
    )
    return event.model_copy(update={
        "status": EventStatus.COMPLETED,
        "results": committed,
        "end_time": completed_at or event.end_time,
    })
