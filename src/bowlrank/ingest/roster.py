"""Helpers to turn pasted roster text into blank player entries."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel

from bowlrank.models import PlayerScore, new_player


logger = logging.getLogger(__name__)

_COLUMN_SPLIT = re.compile(r"[\t,;]+")
# Letters in the second column that mark a handicap-eligible (women's) entry:
# K(obieta), F(emale), W(oman).
_HANDICAP_MARKERS = ("k", "f", "w")


class RosterRow(BaseModel):
    raw_name: str
    raw_marker: Optional[str] = None

    @classmethod
    def from_line(cls, line: str) -> "RosterRow":
        parts = _COLUMN_SPLIT.split(line.strip())
        marker = parts[1] if len(parts) > 1 else None
        return cls(raw_name=parts[0].strip(), raw_marker=marker)

    @property
    def is_handicap_eligible(self) -> bool:
        if not self.raw_marker:
            return False
        marker = self.raw_marker.lower()
        return any(letter in marker for letter in _HANDICAP_MARKERS)


def parse_roster_lines(text: str) -> List[RosterRow]:
    return [RosterRow.from_line(line) for line in text.splitlines() if line.strip()]


def rows_to_players(rows: Iterable[RosterRow]) -> Tuple[PlayerScore, ...]:
    players: list[PlayerScore] = []
    for row in rows:
        if not row.raw_name:
            logger.debug("Skipping roster row without a name: %r", row)
            continue
        players.append(new_player(row.raw_name, is_handicap_eligible=row.is_handicap_eligible))
    return tuple(players)


def parse_roster_text(text: str) -> Tuple[PlayerScore, ...]:
    """Parse ``Name[<TAB|,|;>marker]`` lines into new players with no scores."""

    players = rows_to_players(parse_roster_lines(text))
    logger.info(
        "Parsed %s players from roster text (%s handicap-eligible)",
        len(players),
        sum(1 for player in players if player.is_handicap_eligible),
    )
    return players


__all__ = ["RosterRow", "parse_roster_lines", "parse_roster_text", "rows_to_players"]
