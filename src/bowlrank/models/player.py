"""Canonical player score model shared across scoring and standings layers."""

from __future__ import annotations

import math
import re
from typing import Any, Optional
from uuid import uuid4

from pydantic import BaseModel, Field, field_validator
from pydantic.config import ConfigDict


_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def _parse_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match is None:
            return None
        try:
            return int(match.group(1))
        except ValueError:
            # Digit runs past the interpreter's int conversion limit.
            return None
    return None


def coerce_score(value: Any) -> int:
    """Normalize a raw game value; anything unusable counts as 0."""

    parsed = _parse_int(value)
    return 0 if parsed is None else parsed


def coerce_final_game(value: Any) -> Optional[int]:
    """Normalize a final-round value; blank or unusable means not played."""

    return _parse_int(value)


class PlayerScore(BaseModel):
    """One player's participation in one tournament.

    Raw fields are entered by the organiser; derived fields are filled in by
    :mod:`bowlrank.scoring` and :mod:`bowlrank.standings` and must not be
    edited directly.
    """

    player_id: str = Field(..., min_length=1)
    name: str
    is_handicap_eligible: bool = False
    g1: int = 0
    g2: int = 0
    g3: int = 0
    final_game: Optional[int] = None

    elimination_total: int = 0
    elimination_avg: float = 0.0
    final_total: Optional[float] = None
    rank: Optional[int] = None
    ranking_points: int = Field(0, ge=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("g1", "g2", "g3", mode="before")
    @classmethod
    def _coerce_game(cls, value: Any) -> int:
        return coerce_score(value)

    @field_validator("final_game", mode="before")
    @classmethod
    def _coerce_final(cls, value: Any) -> Optional[int]:
        return coerce_final_game(value)

    @property
    def games(self) -> tuple[int, int, int]:
        return (self.g1, self.g2, self.g3)


def new_player(name: str, *, is_handicap_eligible: bool = False) -> PlayerScore:
    """Create a blank entry with a fresh id and no scores recorded."""

    return PlayerScore(
        player_id=uuid4().hex,
        name=name,
        is_handicap_eligible=is_handicap_eligible,
    )
