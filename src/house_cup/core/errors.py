"""Custom exception hierarchy for the scoring engine."""


class HouseCupError(Exception):
    """Base exception for all scoring engine errors."""


# --- Configuration ---
class ConfigError(HouseCupError):
    """Invalid or missing configuration."""


class SnapshotError(HouseCupError):
    """A competition snapshot could not be read or parsed."""


# --- Results ---
class ResultValidationError(HouseCupError):
    """Provisional results could not be committed."""

    def __init__(self, message: str, participant_id: str = "", placement: int | None = None):
        self.participant_id = participant_id
        self.placement = placement
        super().__init__(message)


class EmptyAssignmentError(ResultValidationError):
    """No placement was assigned a participant."""


class DuplicateParticipantError(ResultValidationError):
    """The same participant was assigned more than one placement."""


class UnknownPlacementError(ResultValidationError):
    """A placement is missing from the event's scoring schedule."""


# --- Events ---
class EventTransitionError(HouseCupError):
    """Illegal event status transition."""

    def __init__(self, event_id: str, current: str, requested: str):
        self.event_id = event_id
        self.current = current
        self.requested = requested
        super().__init__(
            f"Invalid event transition: {current} -> {requested} for event={event_id}"
        )


# --- Roster ---
class RosterError(HouseCupError):
    """Roster data violates a competition rule."""


class DuplicateHouseNameError(RosterError):
    """House display name already used by another house."""


class ScheduleError(RosterError):
    """Scoring schedule is malformed."""
