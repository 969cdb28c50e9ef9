"""Deterministic rankings of houses and players.

Scores sort descending; ties break by display name ascending, compared
case-insensitively the way a locale collation would, then by the exact
name and finally by id, giving a total order.  When every score in scope
is 0 the ranking is simply alphabetical.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from pydantic import BaseModel

from house_cup.core.enums import ALL_SCOPE
from house_cup.core.models import House, Player


def name_key(name: str) -> tuple[str, str]:
    """Sort key for display names: case-insensitive first, exact name second."""
    return (name.casefold(), name)


class RankedEntry(BaseModel):
    """One row of a leaderboard."""

    position: int
    id: str
    name: str
    points: int

    model_config = {"frozen": True}


def house_points(
    house_id: str,
    totals: Mapping[str, int],
    breakdown: Mapping[str, Mapping[str, int]],
    scope: str = ALL_SCOPE,
) -> int:
    """Points of one house within *scope* (``"all"`` or a category id)."""
    if scope == ALL_SCOPE:
        return totals.get(house_id, 0)
    return breakdown.get(house_id, {}).get(scope, 0)


def rank(
    houses: Iterable[House],
    totals: Mapping[str, int],
    breakdown: Mapping[str, Mapping[str, int]],
    scope: str = ALL_SCOPE,
) -> list[str]:
    """Order house ids by points in *scope*, best first."""
    ordered = sorted(
        houses,
        key=lambda h: (
            -house_points(h.id, totals, breakdown, scope), *name_key(h.name), h.id
        ),
    )
    return [h.id for h in ordered]


def rank_players(
    players: Iterable[Player],
    player_totals: Mapping[str, int],
    scope: str = ALL_SCOPE,
) -> list[str]:
    """Order player ids by individual points, optionally within a category."""
    eligible = [
        p for p in players if scope == ALL_SCOPE or p.category_id == scope
    ]
    eligible.sort(
        key=lambda p: (-player_totals.get(p.id, 0), *name_key(p.name), p.id)
    )
    return [p.id for p in eligible]
