"""Cross-tournament league table built from per-tournament ranking points."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Collection, Dict, List, Optional, Sequence

from bowlrank.models import GlobalPlayerStats, Tournament, TournamentPoints
from bowlrank.scoring import ELIMINATION_GAMES


logger = logging.getLogger(__name__)


def player_key(name: str) -> str:
    """Identity of a player across tournaments.

    Ids are tournament-scoped, so players are matched by trimmed display
    name. Two different people entered under the same name end up in one
    league row.
    """

    return name.strip()


@dataclass
class _Accumulator:
    name: str
    total_points: int = 0
    tournaments_played: int = 0
    global_average: float = 0.0
    history: List[TournamentPoints] = field(default_factory=list)

    def add(self, tournament_name: str, points: int, elimination_total: int) -> None:
        self.total_points += points
        self.tournaments_played += 1
        self.history.append(TournamentPoints(tournament_name=tournament_name, points=points))

        played = self.tournaments_played
        previous_sum = self.global_average * ((played - 1) * ELIMINATION_GAMES)
        self.global_average = (previous_sum + elimination_total) / (played * ELIMINATION_GAMES)

    def freeze(self) -> GlobalPlayerStats:
        return GlobalPlayerStats(
            name=self.name,
            total_points=self.total_points,
            tournaments_played=self.tournaments_played,
            global_average=self.global_average,
            history=tuple(self.history),
        )


def select_tournaments(
    tournaments: Sequence[Tournament],
    selected_ids: Optional[Collection[str]] = None,
    *,
    use_all: bool = False,
) -> List[Tournament]:
    if use_all or selected_ids is None:
        return list(tournaments)
    wanted = set(selected_ids)
    return [tournament for tournament in tournaments if tournament.tournament_id in wanted]


def build_global_standings(
    tournaments: Sequence[Tournament],
    selected_ids: Optional[Collection[str]] = None,
    *,
    use_all: bool = False,
) -> List[GlobalPlayerStats]:
    """Fold ranking points and elimination scores into one league table.

    Rows are ordered by total points, then by the per-game average over all
    elimination games played in the selected tournaments.
    """

    chosen = select_tournaments(tournaments, selected_ids, use_all=use_all)
    rows: Dict[str, _Accumulator] = {}

    for tournament in chosen:
        for player in tournament.players:
            key = player_key(player.name)
            entry = rows.get(key)
            if entry is None:
                entry = rows[key] = _Accumulator(name=player.name)
            entry.add(tournament.name, player.ranking_points, player.elimination_total)

    standings = [entry.freeze() for entry in rows.values()]
    standings.sort(key=lambda row: (row.total_points, row.global_average), reverse=True)

    logger.info(
        "Built league table: %s players across %s/%s tournaments",
        len(standings),
        len(chosen),
        len(tournaments),
    )
    return standings


__all__ = ["build_global_standings", "player_key", "select_tournaments"]
