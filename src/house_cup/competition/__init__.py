"""Event lifecycle, timelines and participant selection."""

from house_cup.competition.lifecycle import (
    can_transition,
    complete_event,
    schedule_event,
    start_event,
)
from house_cup.competition.participants import (
    check_eligibility,
    eligible_participants,
    prepare_provisional,
)
from house_cup.competition.timeline import recent_events, upcoming_events

__all__ = [
    "can_transition",
    "check_eligibility",
    "complete_event",
    "eligible_participants",
    "prepare_provisional",
    "recent_events",
    "schedule_event",
    "start_event",
    "upcoming_events",
]
