"""Roster editing operations built on the standings resolver."""

from .service import (
    add_player,
    import_players,
    paste_scores,
    recompute_tournament,
    remove_player,
    rename_player,
    replace_players,
    set_score,
    toggle_handicap,
)

__all__ = [
    "add_player",
    "import_players",
    "paste_scores",
    "recompute_tournament",
    "remove_player",
    "rename_player",
    "replace_players",
    "set_score",
    "toggle_handicap",
]
