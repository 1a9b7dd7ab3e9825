"""Scoring engine for elimination and final rounds."""

from .engine import (
    ELIMINATION_GAMES,
    compute_elimination_stats,
    compute_final_score,
    compute_player_stats,
    compute_roster_stats,
    handicap_per_game,
)

__all__ = [
    "ELIMINATION_GAMES",
    "compute_elimination_stats",
    "compute_final_score",
    "compute_player_stats",
    "compute_roster_stats",
    "handicap_per_game",
]
