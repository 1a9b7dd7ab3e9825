"""Scoring and ranking engine for bowling league tournaments."""

from bowlrank.config import DEFAULT_RULES, LeagueRules, RulesConfigError, get_rules
from bowlrank.league import build_global_standings
from bowlrank.models import GlobalPlayerStats, PlayerScore, Tournament, TournamentPoints
from bowlrank.scoring import compute_elimination_stats, compute_final_score
from bowlrank.standings import assign_ranks_and_points, resolve_standings, select_finalists, sort_players

__all__ = [
    "DEFAULT_RULES",
    "GlobalPlayerStats",
    "LeagueRules",
    "PlayerScore",
    "RulesConfigError",
    "Tournament",
    "TournamentPoints",
    "assign_ranks_and_points",
    "build_global_standings",
    "compute_elimination_stats",
    "compute_final_score",
    "get_rules",
    "resolve_standings",
    "select_finalists",
    "sort_players",
]
