"""Input adapters that turn pasted text into roster changes."""

from .grid import ELIMINATION_FIELDS, SCORE_FIELDS, ScoreField, apply_score_grid, validate_field
from .roster import RosterRow, parse_roster_lines, parse_roster_text, rows_to_players

__all__ = [
    "ELIMINATION_FIELDS",
    "SCORE_FIELDS",
    "RosterRow",
    "ScoreField",
    "apply_score_grid",
    "parse_roster_lines",
    "parse_roster_text",
    "rows_to_players",
    "validate_field",
]
