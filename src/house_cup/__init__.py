"""House Cup scoring engine.

Validates result sheets and recomputes house scoreboards from plain
competition snapshots.
"""

from house_cup.scoring import Scoreboard, ScoreSnapshot, aggregate, rank, rank_players
from house_cup.validation import CommitOutcome, ResultValidator, validate

__version__ = "0.1.0"

__all__ = [
    "CommitOutcome",
    "ResultValidator",
    "ScoreSnapshot",
    "Scoreboard",
    "aggregate",
    "rank",
    "rank_players",
    "validate",
]
