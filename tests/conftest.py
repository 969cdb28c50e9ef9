"""Shared fixtures for the house-cup test suite."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from house_cup.core.enums import EventStatus, EventType
from house_cup.core.models import (
    Category,
    CompetitionSnapshot,
    Event,
    EventResult,
    House,
    Player,
)


# ---------------------------------------------------------------------------
# Roster
# ---------------------------------------------------------------------------

@pytest.fixture
def houses() -> list[House]:
    return [
        House(id="h-red", name="Red Dragons", color="#FF6B6B"),
        House(id="h-blue", name="Blue Whales", color="#5DADE2"),
        House(id="h-green", name="Green Owls", color="#81C784"),
    ]


@pytest.fixture
def categories() -> list[Category]:
    return [
        Category(id="kids", label="Kids"),
        Category(id="adults", label="Adults"),
    ]


@pytest.fixture
def players() -> list[Player]:
    return [
        Player(id="p-ana", name="Ana", house_id="h-red", category_id="kids"),
        Player(id="p-ben", name="Ben", house_id="h-blue", category_id="kids"),
        Player(id="p-cai", name="Cai", house_id="h-green", category_id="kids"),
        Player(id="p-dev", name="Dev", house_id="h-red", category_id="adults"),
        Player(id="p-eli", name="Eli", house_id="h-blue", category_id="adults"),
    ]


# ---------------------------------------------------------------------------
# Event helpers
# ---------------------------------------------------------------------------

def _results(*pairs: tuple[int, str]) -> tuple[EventResult, ...]:
    """Build a result tuple from (placement, participant_id) pairs."""
    return tuple(EventResult(placement=p, participant_id=pid) for p, pid in pairs)


@pytest.fixture
def make_event():
    """Factory for events; completed when results are given."""

    counter = {"n": 0}
    base_time = datetime(2024, 7, 1, 9, 0, tzinfo=timezone.utc)

    def _make(
        type: EventType = EventType.INDIVIDUAL,
        category_id: str = "kids",
        scoring: dict[int, int] | None = None,
        result_pairs: list[tuple[int, str]] | None = None,
        status: EventStatus | None = None,
        **kwargs,
    ) -> Event:
        counter["n"] += 1
        n = counter["n"]
        if status is None:
            status = EventStatus.COMPLETED if result_pairs else EventStatus.SCHEDULED
        return Event(
            id=kwargs.pop("id", f"e-{n}"),
            name=kwargs.pop("name", f"Event {n}"),
            type=type,
            category_id=category_id,
            scoring=scoring if scoring is not None else {1: 5, 2: 3, 3: 1},
            status=status,
            results=_results(*(result_pairs or [])),
            start_time=kwargs.pop("start_time", base_time + timedelta(hours=n)),
            **kwargs,
        )

    return _make


@pytest.fixture
def sample_snapshot(houses, categories, players, make_event) -> CompetitionSnapshot:
    """A small competition with individual and group events."""
    return CompetitionSnapshot(
        houses=tuple(houses),
        categories=tuple(categories),
        players=tuple(players),
        events=(
            make_event(
                name="Sack Race",
                result_pairs=[(1, "p-ana"), (2, "p-ben"), (3, "p-cai")],
            ),
            make_event(
                name="Chess",
                category_id="adults",
                scoring={1: 10, 2: 6},
                result_pairs=[(1, "p-eli"), (2, "p-dev")],
            ),
            make_event(
                name="Tug of War",
                type=EventType.GROUP,
                category_id="adults",
                scoring={1: 20, 2: 10, 3: 5},
                result_pairs=[(1, "h-green"), (2, "h-red"), (3, "h-blue")],
            ),
            make_event(name="Egg and Spoon"),
        ),
    )
