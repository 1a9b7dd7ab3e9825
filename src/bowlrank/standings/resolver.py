"""Finalist selection, tie-break ordering and rank/point assignment."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cmp_to_key
from typing import AbstractSet, Callable, Dict, Iterable, List, Literal, Optional, Sequence, Tuple

from bowlrank.config import DEFAULT_RULES, LeagueRules
from bowlrank.models import PlayerScore
from bowlrank.scoring import compute_roster_stats


logger = logging.getLogger(__name__)

Phase = Literal["ELIMINATION", "FINAL"]

# Stand-in final total for finalists who have not bowled the final game.
NOT_PLAYED_FINAL_TOTAL = -1.0


@dataclass(frozen=True)
class StandingEntry:
    """Rank and ranking points earned at one classification position."""

    rank: int
    points: int


def _descending(a: float, b: float) -> int:
    if a > b:
        return -1
    if a < b:
        return 1
    return 0


def _elimination_key(player: PlayerScore) -> tuple[int, str]:
    return (-player.elimination_total, player.name)


def select_finalists(
    roster: Iterable[PlayerScore],
    rules: LeagueRules = DEFAULT_RULES,
) -> frozenset[str]:
    """Return ids of the top ``rules.finalists_count`` players by elimination total.

    Ties are broken by name so the cut does not depend on roster order.
    """

    ranked = sorted(roster, key=_elimination_key)
    return frozenset(player.player_id for player in ranked[: rules.finalists_count])


def _final_phase_comparator(
    finalists: AbstractSet[str],
    epsilon: float,
    *,
    extended: bool,
) -> Callable[[PlayerScore, PlayerScore], int]:
    def compare(a: PlayerScore, b: PlayerScore) -> int:
        a_finalist = a.player_id in finalists
        b_finalist = b.player_id in finalists
        if a_finalist != b_finalist:
            return -1 if a_finalist else 1

        if a_finalist:
            score_a = NOT_PLAYED_FINAL_TOTAL if a.final_total is None else a.final_total
            score_b = NOT_PLAYED_FINAL_TOTAL if b.final_total is None else b.final_total
            if abs(score_a - score_b) > epsilon:
                return _descending(score_a, score_b)
            result = _descending(a.elimination_avg, b.elimination_avg)
            if result or not extended:
                return result
            return _descending(a.elimination_total, b.elimination_total)

        result = _descending(a.elimination_total, b.elimination_total)
        if result or not extended:
            return result
        return _descending(a.elimination_avg, b.elimination_avg)

    return compare


def resolve_standings(
    roster: Sequence[PlayerScore],
    rules: LeagueRules = DEFAULT_RULES,
    finalists: Optional[AbstractSet[str]] = None,
) -> List[PlayerScore]:
    """Order the whole roster for the final classification.

    Finalists come first, ordered by final total (within ``rules.tie_epsilon``
    counts as a tie) then elimination average. Everyone else follows by
    elimination total. Remaining ties keep roster order.
    """

    if finalists is None:
        finalists = select_finalists(roster, rules)
    compare = _final_phase_comparator(finalists, rules.tie_epsilon, extended=False)
    return sorted(roster, key=cmp_to_key(compare))


def rank_lookup(
    roster: Sequence[PlayerScore],
    rules: LeagueRules = DEFAULT_RULES,
) -> Dict[str, StandingEntry]:
    """Map player id to the rank and points earned in the classification."""

    finalists = select_finalists(roster, rules)
    order = resolve_standings(roster, rules, finalists)
    return {
        player.player_id: StandingEntry(
            rank=index + 1,
            points=max(0, rules.max_ranking_points - index),
        )
        for index, player in enumerate(order)
    }


def assign_ranks_and_points(
    roster: Iterable[PlayerScore],
    rules: LeagueRules = DEFAULT_RULES,
) -> Tuple[PlayerScore, ...]:
    """Recompute every derived field and return the roster in its input order.

    Order is kept so an entry form does not reshuffle rows while scores are
    being typed; the classification only shows up in ``rank``.
    """

    calculated = compute_roster_stats(roster, rules)
    lookup = rank_lookup(calculated, rules)

    result: list[PlayerScore] = []
    for player in calculated:
        entry = lookup.get(player.player_id)
        result.append(
            player.model_copy(
                update={
                    "rank": entry.rank if entry else None,
                    "ranking_points": entry.points if entry else 0,
                }
            )
        )

    logger.info(
        "Ranked %s players (%s finalist slots, %s max points)",
        len(result),
        min(rules.finalists_count, len(result)),
        rules.max_ranking_points,
    )
    return tuple(result)


def sort_players(
    roster: Iterable[PlayerScore],
    phase: Phase,
    rules: LeagueRules = DEFAULT_RULES,
) -> List[PlayerScore]:
    """Display order for the elimination or final view. Does not affect scoring."""

    players = list(roster)
    if phase == "ELIMINATION":
        return sorted(players, key=_elimination_key)
    if phase != "FINAL":
        raise ValueError(f"Unknown phase {phase!r}; expected 'ELIMINATION' or 'FINAL'")

    finalists = select_finalists(players, rules)
    compare = _final_phase_comparator(finalists, rules.tie_epsilon, extended=True)
    return sorted(players, key=cmp_to_key(compare))


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
