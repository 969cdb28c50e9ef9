"""Score aggregation and rankings.

Public API
----------
Aggregation:
    aggregate, ScoreSnapshot

Rankings:
    rank, rank_players, house_points, RankedEntry

Scoreboard:
    Scoreboard
"""

from house_cup.scoring.aggregator import ScoreSnapshot, aggregate
from house_cup.scoring.ranking import RankedEntry, house_points, rank, rank_players
from house_cup.scoring.scoreboard import Scoreboard

__all__ = [
    "RankedEntry",
    "ScoreSnapshot",
    "Scoreboard",
    "aggregate",
    "house_points",
    "rank",
    "rank_players",
]
