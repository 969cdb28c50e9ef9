"""Participant selection helpers for recording results.

These back the host's result-entry form: which participants may be picked
for an event, and a blank sheet with one row per scored placement.  The
result validator does not call ``check_eligibility``.
"""

from __future__ import annotations

from collections.abc import Iterable

from house_cup.core.enums import EventType, ValidationCode
from house_cup.core.models import Event, EventResult, House, Player
from house_cup.scoring.ranking import name_key
from house_cup.validation.models import ValidationIssue


def prepare_provisional(event: Event) -> list[EventResult]:
    """Provisional sheet for *event*.

    Returns the existing results when the event already has some, otherwise
    one unassigned row per schedule placement in ascending order.
    """
    if event.results:
        return list(event.results)
    return [EventResult(placement=p) for p in sorted(event.scoring)]


def eligible_participants(
    event: Event,
    houses: Iterable[House],
    players: Iterable[Player],
) -> list[House] | list[Player]:
    """Players of the event's category, or every house for group events."""
    if event.type == EventType.GROUP:
        return sorted(houses, key=lambda h: (*name_key(h.name), h.id))
    return sorted(
        (p for p in players if p.category_id == event.category_id),
        key=lambda p: (*name_key(p.name), p.id),
    )


def check_eligibility(
    event: Event,
    results: Iterable[EventResult],
    houses: Iterable[House],
    players: Iterable[Player],
) -> list[ValidationIssue]:
    """Report assigned participants that may not take part in *event*."""
    allowed = {p.id for p in eligible_participants(event, houses, players)}
    issues: list[ValidationIssue] = []
    for result in results:
        if not result.is_assigned or result.participant_id in allowed:
            continue
        issues.append(ValidationIssue(
            code=ValidationCode.INELIGIBLE_PARTICIPANT,
            message=(
                f"{result.participant_id} is not eligible for "
                f"{event.type.value} event {event.name!r}"
            ),
            participant_id=result.participant_id,
            placement=result.placement,
        ))
    return issues
