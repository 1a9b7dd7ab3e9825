"""Apply spreadsheet-style score blocks onto a roster."""

from __future__ import annotations

import logging
import re
from typing import Dict, Iterable, Literal, Sequence, Tuple

from bowlrank.models import PlayerScore, coerce_final_game


logger = logging.getLogger(__name__)

ScoreField = Literal["g1", "g2", "g3", "final_game"]

ELIMINATION_FIELDS: Tuple[str, ...] = ("g1", "g2", "g3")
SCORE_FIELDS: Tuple[str, ...] = ELIMINATION_FIELDS + ("final_game",)

_ROW_SPLIT = re.compile(r"\r?\n")


def validate_field(field: str) -> str:
    if field not in SCORE_FIELDS:
        raise ValueError(f"Unknown score field {field!r}; expected one of {', '.join(SCORE_FIELDS)}")
    return field


def _row_updates(cells: Sequence[str], start_field: str) -> Dict[str, int]:
    updates: Dict[str, int] = {}
    for column, cell in enumerate(cells):
        value = coerce_final_game(cell.strip())
        if value is None:
            logger.debug("Skipping non-numeric cell %r", cell)
            continue
        if start_field == "final_game":
            if column == 0:
                updates["final_game"] = value
            continue
        target = ELIMINATION_FIELDS.index(start_field) + column
        if target < len(ELIMINATION_FIELDS):
            updates[ELIMINATION_FIELDS[target]] = value
    return updates


def apply_score_grid(
    roster: Iterable[PlayerScore],
    view_order: Sequence[PlayerScore],
    start_player_id: str,
    start_field: ScoreField,
    text: str,
) -> Tuple[PlayerScore, ...]:
    """Write a tab/newline separated block of scores into the roster.

    Rows are aligned against ``view_order`` (the order the rows are shown
    in) starting at ``start_player_id``; columns run rightwards from
    ``start_field`` through the elimination games. A block started on the
    final game only uses its first column. The returned roster keeps the
    input order; derived fields are left for the caller to recompute.
    """

    validate_field(start_field)
    players = tuple(roster)
    rows = [row for row in _ROW_SPLIT.split(text or "") if row.strip()]
    if not rows:
        return players

    view_ids = [player.player_id for player in view_order]
    if start_player_id not in view_ids:
        logger.debug("Paste target %s not in view; ignoring block", start_player_id)
        return players
    start_index = view_ids.index(start_player_id)

    updates: Dict[str, Dict[str, int]] = {}
    for offset, row in enumerate(rows):
        target_index = start_index + offset
        if target_index >= len(view_ids):
            break
        row_updates = _row_updates(row.split("\t"), start_field)
        if row_updates:
            updates[view_ids[target_index]] = row_updates

    logger.info("Pasted scores for %s players starting at %s", len(updates), start_field)
    return tuple(
        player.model_copy(update=updates[player.player_id]) if player.player_id in updates else player
        for player in players
    )


__all__ = [
    "ELIMINATION_FIELDS",
    "SCORE_FIELDS",
    "ScoreField",
    "apply_score_grid",
    "validate_field",
]
