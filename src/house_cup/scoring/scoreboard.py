"""Scoreboard: one recomputation bundled with its leaderboards.

Usage::

    board = Scoreboard.build(snapshot)
    for entry in board.house_ranking("all"):
        print(entry.position, entry.name, entry.points)
"""

from __future__ import annotations

from pydantic import BaseModel

from house_cup.core.enums import ALL_SCOPE
from house_cup.core.ids import payload_hash
from house_cup.core.models import CompetitionSnapshot, House, Player

from .aggregator import ScoreSnapshot, aggregate
from .ranking import RankedEntry, house_points, rank, rank_players


class Scoreboard(BaseModel):
    """Aggregated scores plus the roster needed to render them."""

    scores: ScoreSnapshot
    houses: tuple[House, ...] = ()
    players: tuple[Player, ...] = ()

    model_config = {"frozen": True}

    @classmethod
    def build(cls, snapshot: CompetitionSnapshot) -> Scoreboard:
        scores = aggregate(
            snapshot.houses, snapshot.categories, snapshot.players, snapshot.events
        )
        return cls(scores=scores, houses=snapshot.houses, players=snapshot.players)

    def house_ranking(self, scope: str = ALL_SCOPE) -> list[RankedEntry]:
        by_id = {h.id: h for h in self.houses}
        order = rank(self.houses, self.scores.totals, self.scores.breakdown, scope)
        return [
            RankedEntry(
                position=i + 1,
                id=house_id,
                name=by_id[house_id].name,
                points=house_points(
                    house_id, self.scores.totals, self.scores.breakdown, scope
                ),
            )
            for i, house_id in enumerate(order)
        ]

    def player_ranking(self, scope: str = ALL_SCOPE) -> list[RankedEntry]:
        by_id = {p.id: p for p in self.players}
        order = rank_players(self.players, self.scores.player_totals, scope)
        return [
            RankedEntry(
                position=i + 1,
                id=player_id,
                name=by_id[player_id].name,
                points=self.scores.player_totals.get(player_id, 0),
            )
            for i, player_id in enumerate(order)
        ]

    @property
    def fingerprint(self) -> str:
        """Stable hash of totals and breakdown; changes only when scores do."""
        return payload_hash({
            "totals": self.scores.totals,
            "breakdown": self.scores.breakdown,
        })
