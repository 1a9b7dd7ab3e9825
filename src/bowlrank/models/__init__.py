"""Canonical models shared across scoring, standings and league layers."""

from .player import PlayerScore, coerce_final_game, coerce_score, new_player
from .tournament import GlobalPlayerStats, Tournament, TournamentPoints, new_tournament

__all__ = [
    "GlobalPlayerStats",
    "PlayerScore",
    "Tournament",
    "TournamentPoints",
    "coerce_final_game",
    "coerce_score",
    "new_player",
    "new_tournament",
]
