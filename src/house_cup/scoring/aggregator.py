"""Score aggregation over the full event history.

This is the shared recomputation path: the host calls ``aggregate`` with a
complete snapshot whenever houses, players, categories or events change,
and renders whatever comes back.  No state survives between calls.

Steps:
1. Seed every house with 0 points and every (house, category) pair with 0.
2. Fold the results of every completed event into the maps.
3. Entries whose participant no longer resolves are skipped, never fatal.

Points are integers so the fold is exact and order-independent.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from pydantic import BaseModel, Field

from house_cup.core.enums import EventType
from house_cup.core.models import Category, Event, EventResult, House, Player

logger = logging.getLogger(__name__)

HouseScore = dict[str, int]
CategoryBreakdown = dict[str, dict[str, int]]
PlayerScore = dict[str, int]


class ScoreSnapshot(BaseModel):
    """Output of ``aggregate``."""

    totals: HouseScore = Field(default_factory=dict)
    breakdown: CategoryBreakdown = Field(default_factory=dict)
    player_totals: PlayerScore = Field(default_factory=dict)  # individual events only
    skipped_entries: int = 0  # stale participant or house references

    model_config = {"frozen": True}


def aggregate(
    houses: Iterable[House],
    categories: Iterable[Category],
    players: Iterable[Player],
    events: Iterable[Event],
) -> ScoreSnapshot:
    """Recompute house totals and per-category breakdowns.

    Only events with status ``completed`` and at least one committed result
    contribute.  A placement missing from the event's schedule scores 0.
    An event whose category is not on the roster still counts toward the
    house total but adds no breakdown key.

    Args:
        houses: All known houses.
        categories: All known categories.
        players: All known players.
        events: Event history in any order.

    Returns:
        ScoreSnapshot with an explicit entry for every house and every
        (house, category) pair.
    """
    category_ids = [c.id for c in categories]
    totals: HouseScore = {}
    breakdown: CategoryBreakdown = {}
    for house in houses:
        totals[house.id] = 0
        breakdown[house.id] = {cid: 0 for cid in category_ids}

    players_by_id = {p.id: p for p in players}
    player_totals: PlayerScore = {pid: 0 for pid in players_by_id}
    skipped = 0
    n_events = 0

    for event in events:
        if not event.is_completed or not event.results:
            continue
        n_events += 1

        for result in event.results:
            house_id = _resolve_house(event, result, players_by_id, totals)
            if house_id is None:
                skipped += 1
                continue

            points = event.points_for(result.placement)
            if result.placement not in event.scoring:
                logger.debug(
                    "Placement %d not in schedule of event %s, scoring 0",
                    result.placement,
                    event.id,
                )

            totals[house_id] += points
            per_category = breakdown[house_id]
            if event.category_id in per_category:
                per_category[event.category_id] += points
            if event.type == EventType.INDIVIDUAL:
                player_totals[result.participant_id] += points

    logger.debug(
        "Aggregated %d completed events over %d houses (%d entries skipped)",
        n_events,
        len(totals),
        skipped,
    )
    return ScoreSnapshot(
        totals=totals,
        breakdown=breakdown,
        player_totals=player_totals,
        skipped_entries=skipped,
    )


def _resolve_house(
    event: Event,
    result: EventResult,
    players_by_id: dict[str, Player],
    totals: HouseScore,
) -> str | None:
    """House credited for *result*, or None if the reference is stale."""
    if event.type == EventType.INDIVIDUAL:
        player = players_by_id.get(result.participant_id)
        if player is None:
            logger.debug(
                "Skipping result of event %s: unknown player %s",
                event.id,
                result.participant_id,
            )
            return None
        house_id = player.house_id
    else:
        house_id = result.participant_id

    if house_id not in totals:
        logger.debug(
            "Skipping result of event %s: unknown house %s",
            event.id,
            house_id,
        )
        return None
    return house_id
