"""Roster edits that always hand back a fully recomputed roster."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Sequence, Tuple

from bowlrank.config import DEFAULT_RULES, LeagueRules
from bowlrank.ingest import ScoreField, apply_score_grid, parse_roster_text, validate_field
from bowlrank.models import PlayerScore, Tournament, coerce_score, new_player
from bowlrank.standings import assign_ranks_and_points


logger = logging.getLogger(__name__)


def _update_player(
    roster: Iterable[PlayerScore],
    player_id: str,
    changes: dict[str, Any],
    rules: LeagueRules,
) -> Tuple[PlayerScore, ...]:
    players = tuple(roster)
    if not any(player.player_id == player_id for player in players):
        logger.debug("No player %s in roster; edit ignored", player_id)
    updated = (
        player.model_copy(update=changes) if player.player_id == player_id else player
        for player in players
    )
    return assign_ranks_and_points(updated, rules)


def set_score(
    roster: Iterable[PlayerScore],
    player_id: str,
    field: ScoreField,
    value: Any,
    rules: LeagueRules = DEFAULT_RULES,
) -> Tuple[PlayerScore, ...]:
    """Store a raw score as typed into an entry cell.

    Blank or unparseable input counts as 0, for the final game as well.
    Pass ``None`` for ``final_game`` to mark the final as not played.
    """

    validate_field(field)
    if field == "final_game" and value is None:
        normalized: Optional[int] = None
    else:
        normalized = coerce_score(value)
    return _update_player(roster, player_id, {field: normalized}, rules)


def rename_player(
    roster: Iterable[PlayerScore],
    player_id: str,
    name: str,
    rules: LeagueRules = DEFAULT_RULES,
) -> Tuple[PlayerScore, ...]:
    return _update_player(roster, player_id, {"name": name}, rules)


def toggle_handicap(
    roster: Iterable[PlayerScore],
    player_id: str,
    rules: LeagueRules = DEFAULT_RULES,
) -> Tuple[PlayerScore, ...]:
    players = tuple(roster)
    target = next((player for player in players if player.player_id == player_id), None)
    if target is None:
        return _update_player(players, player_id, {}, rules)
    return _update_player(
        players,
        player_id,
        {"is_handicap_eligible": not target.is_handicap_eligible},
        rules,
    )


def add_player(
    roster: Iterable[PlayerScore],
    name: Optional[str] = None,
    *,
    is_handicap_eligible: bool = False,
    rules: LeagueRules = DEFAULT_RULES,
) -> Tuple[PlayerScore, ...]:
    """Append a blank entry; unnamed entries are numbered after the roster size."""

    players = tuple(roster)
    player = new_player(
        name if name is not None else f"Player {len(players) + 1}",
        is_handicap_eligible=is_handicap_eligible,
    )
    return assign_ranks_and_points(players + (player,), rules)


def remove_player(
    roster: Iterable[PlayerScore],
    player_id: str,
    rules: LeagueRules = DEFAULT_RULES,
) -> Tuple[PlayerScore, ...]:
    remaining = [player for player in roster if player.player_id != player_id]
    return assign_ranks_and_points(remaining, rules)


def import_players(
    roster: Iterable[PlayerScore],
    text: str,
    rules: LeagueRules = DEFAULT_RULES,
) -> Tuple[PlayerScore, ...]:
    """Append players parsed from pasted roster text."""

    return assign_ranks_and_points(tuple(roster) + parse_roster_text(text), rules)


def paste_scores(
    roster: Iterable[PlayerScore],
    view_order: Sequence[PlayerScore],
    start_player_id: str,
    start_field: ScoreField,
    text: str,
    rules: LeagueRules = DEFAULT_RULES,
) -> Tuple[PlayerScore, ...]:
    pasted = apply_score_grid(roster, view_order, start_player_id, start_field, text)
    return assign_ranks_and_points(pasted, rules)


def replace_players(
    tournament: Tournament,
    players: Iterable[PlayerScore],
    rules: LeagueRules = DEFAULT_RULES,
) -> Tournament:
    """Return ``tournament`` holding the recomputed ``players``."""

    return tournament.model_copy(update={"players": assign_ranks_and_points(players, rules)})


def recompute_tournament(tournament: Tournament, rules: LeagueRules = DEFAULT_RULES) -> Tournament:
    return replace_players(tournament, tournament.players, rules)


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
