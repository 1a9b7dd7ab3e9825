"""Ranking resolver: finalists, classification order, ranks and points."""

from .resolver import (
    NOT_PLAYED_FINAL_TOTAL,
    Phase,
    StandingEntry,
    assign_ranks_and_points,
    rank_lookup,
    resolve_standings,
    select_finalists,
    sort_players,
)

__all__ = [
    "NOT_PLAYED_FINAL_TOTAL",
    "Phase",
    "StandingEntry",
    "assign_ranks_and_points",
    "rank_lookup",
    "resolve_standings",
    "select_finalists",
    "sort_players",
]
