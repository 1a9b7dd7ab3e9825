"""League-wide aggregation across tournaments."""

from .standings import build_global_standings, player_key, select_tournaments

__all__ = ["build_global_standings", "player_key", "select_tournaments"]
