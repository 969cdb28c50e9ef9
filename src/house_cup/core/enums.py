"""Enumerations used across the scoring engine."""

from enum import Enum

# Ranking scope selecting overall totals instead of a single category.
ALL_SCOPE = "all"


class EventType(str, Enum):
    INDIVIDUAL = "individual"  # Participants are players
    GROUP = "group"  # Participants are houses


class EventStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"

    @property
    def is_terminal(self) -> bool:
        return self is EventStatus.COMPLETED


class ValidationCode(str, Enum):
    EMPTY_ASSIGNMENT = "empty_assignment"
    DUPLICATE_PARTICIPANT = "duplicate_participant"
    UNKNOWN_PLACEMENT = "unknown_placement"
    INELIGIBLE_PARTICIPANT = "ineligible_participant"
