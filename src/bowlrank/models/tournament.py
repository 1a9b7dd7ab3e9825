"""Tournament and league-table models."""

from __future__ import annotations

from datetime import date as Date
from typing import Tuple
from uuid import uuid4

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .player import PlayerScore


class Tournament(BaseModel):
    """Ordered roster for a single league night.

    Player order is the order entries were added in and is preserved through
    every recomputation.
    """

    tournament_id: str = Field(..., min_length=1)
    name: str
    date: Date
    players: Tuple[PlayerScore, ...] = ()
    is_finished: bool = False

    model_config = ConfigDict(frozen=True)


class TournamentPoints(BaseModel):
    tournament_name: str
    points: int

    model_config = ConfigDict(frozen=True)


class GlobalPlayerStats(BaseModel):
    """One league-table row aggregated over the selected tournaments."""

    name: str
    total_points: int = 0
    tournaments_played: int = 0
    global_average: float = 0.0
    history: Tuple[TournamentPoints, ...] = ()

    model_config = ConfigDict(frozen=True)


def new_tournament(name: str, date: Date) -> Tournament:
    return Tournament(tournament_id=uuid4().hex, name=name, date=date)
