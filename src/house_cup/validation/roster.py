"""Roster rules checked by the host before saving houses and events."""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from house_cup.core.errors import DuplicateHouseNameError, ScheduleError
from house_cup.core.models import House


def _normalize_name(name: str) -> str:
    return name.strip().casefold()


def is_name_taken(
    houses: Iterable[House],
    name: str,
    exclude_id: str | None = None,
) -> bool:
    """True if another house already uses *name* (trimmed, case-insensitive).

    ``exclude_id`` skips the house being edited.
    """
    wanted = _normalize_name(name)
    return any(
        _normalize_name(house.name) == wanted and house.id != exclude_id
        for house in houses
    )


def ensure_unique_name(
    houses: Iterable[House],
    name: str,
    exclude_id: str | None = None,
) -> None:
    if not name.strip():
        raise DuplicateHouseNameError("House name must not be empty")
    if is_name_taken(houses, name, exclude_id):
        raise DuplicateHouseNameError(f"House name already taken: {name.strip()!r}")


def validate_schedule(schedule: Mapping[int, int]) -> None:
    """Check a scoring schedule before it is attached to an event.

    Raises ``ScheduleError`` if the schedule is empty, has a placement
    below 1, or awards negative points.
    """
    if not schedule:
        raise ScheduleError("Scoring schedule needs at least one placement")
    for placement, points in schedule.items():
        if placement < 1:
            raise ScheduleError(f"Placement must be >= 1, got {placement}")
        if points < 0:
            raise ScheduleError(
                f"Points must be non-negative, got {points} for placement {placement}"
            )
