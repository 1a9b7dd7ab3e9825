"""Per-player elimination and final score computation."""

from __future__ import annotations

from typing import Iterable, Tuple

from bowlrank.config import DEFAULT_RULES, LeagueRules
from bowlrank.models import PlayerScore


ELIMINATION_GAMES = 3


def handicap_per_game(player: PlayerScore, rules: LeagueRules = DEFAULT_RULES) -> int:
    return rules.handicap_bonus if player.is_handicap_eligible else 0


def compute_elimination_stats(player: PlayerScore, rules: LeagueRules = DEFAULT_RULES) -> PlayerScore:
    """Return ``player`` with elimination total and average filled in.

    The handicap is added to each of the three elimination games.
    """

    handicap = handicap_per_game(player, rules)
    total = player.g1 + player.g2 + player.g3 + ELIMINATION_GAMES * handicap
    return player.model_copy(
        update={
            "elimination_total": total,
            "elimination_avg": total / ELIMINATION_GAMES,
        }
    )


def compute_final_score(player: PlayerScore, rules: LeagueRules = DEFAULT_RULES) -> PlayerScore:
    """Return ``player`` with the final total filled in.

    Final total is the final game plus handicap, plus the elimination
    average (which already carries the handicap from the elimination games).
    A player without a final game has no final total.
    """

    if player.final_game is None:
        return player.model_copy(update={"final_total": None})

    handicap = handicap_per_game(player, rules)
    final_total = (player.final_game + handicap) + player.elimination_avg
    return player.model_copy(update={"final_total": final_total})


def compute_player_stats(player: PlayerScore, rules: LeagueRules = DEFAULT_RULES) -> PlayerScore:
    return compute_final_score(compute_elimination_stats(player, rules), rules)


def compute_roster_stats(
    roster: Iterable[PlayerScore],
    rules: LeagueRules = DEFAULT_RULES,
) -> Tuple[PlayerScore, ...]:
    """Recompute derived scores for every player, keeping roster order."""

    return tuple(compute_player_stats(player, rules) for player in roster)
