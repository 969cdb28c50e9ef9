"""Core domain models for the competition.

These are the plain data snapshots the host hands to the engine.  All of
them are frozen: the engine only reads and derives, it never mutates or
persists roster data.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from .enums import EventStatus, EventType
from .errors import SnapshotError

# Placement (1 = best) -> points awarded.
ScoringSchedule = dict[int, int]


# ---------------------------------------------------------------------------
# Roster
# ---------------------------------------------------------------------------

class House(BaseModel):
    """A competing team."""

    id: str
    name: str
    color: str = "#FF6B6B"

    model_config = {"frozen": True}


class Category(BaseModel):
    """Groups events and players for breakdowns and eligibility."""

    id: str
    label: str

    model_config = {"frozen": True}


class Player(BaseModel):
    """An individual competitor, member of exactly one house and category."""

    id: str
    name: str
    house_id: str
    category_id: str

    model_config = {"frozen": True}


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

class EventResult(BaseModel):
    """One placement assignment.

    An empty ``participant_id`` marks an unassigned placement and is only
    meaningful on a provisional sheet; committed results never carry one.
    """

    placement: int
    participant_id: str = ""

    model_config = {"frozen": True}

    @property
    def is_assigned(self) -> bool:
        return bool(self.participant_id.strip())


class Event(BaseModel):
    """A scheduled or completed competition event."""

    id: str
    name: str
    type: EventType
    category_id: str
    scoring: ScoringSchedule = Field(default_factory=dict)
    status: EventStatus = EventStatus.SCHEDULED
    results: tuple[EventResult, ...] = ()
    start_time: datetime | None = None
    end_time: datetime | None = None

    model_config = {"frozen": True}

    @property
    def is_completed(self) -> bool:
        return self.status == EventStatus.COMPLETED

    def points_for(self, placement: int) -> int:
        """Points for *placement*; placements outside the schedule score 0."""
        return self.scoring.get(placement, 0)


# ---------------------------------------------------------------------------
# Snapshot
# ---------------------------------------------------------------------------

class CompetitionSnapshot(BaseModel):
    """Consistent copy of everything the engine needs for one recomputation."""

    houses: tuple[House, ...] = ()
    categories: tuple[Category, ...] = ()
    players: tuple[Player, ...] = ()
    events: tuple[Event, ...] = ()

    model_config = {"frozen": True}

    def event(self, event_id: str) -> Event | None:
        for event in self.events:
            if event.id == event_id:
                return event
        return None

    @classmethod
    def from_json_file(cls, path: str | Path) -> CompetitionSnapshot:
        """Load a snapshot exported by the host as JSON."""
        path = Path(path)
        try:
            raw = path.read_text(encoding="utf-8")
        except OSError as exc:
            raise SnapshotError(f"Cannot read snapshot {path}: {exc}") from exc
        try:
            return cls.model_validate_json(raw)
        except PydanticValidationError as exc:
            raise SnapshotError(f"Invalid snapshot {path}: {exc}") from exc
