"""League rule constants for supported rule sets."""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass, fields, replace
from typing import Any, Dict, Iterable, Mapping, Optional


logger = logging.getLogger(__name__)

_HANDICAP_ENV = "BOWLRANK_HANDICAP_BONUS"
_FINALISTS_ENV = "BOWLRANK_FINALISTS_COUNT"
_MAX_POINTS_ENV = "BOWLRANK_MAX_RANKING_POINTS"
_TIE_EPSILON_ENV = "BOWLRANK_TIE_EPSILON"


class RulesConfigError(ValueError):
    """Raised when a rule set carries values the engine cannot work with."""


@dataclass(frozen=True)
class LeagueRules:
    name: str
    handicap_bonus: int
    finalists_count: int
    max_ranking_points: int
    # Final totals closer than this are treated as equal.
    tie_epsilon: float = 0.01

    def __post_init__(self) -> None:
        for attr in ("handicap_bonus", "finalists_count", "max_ranking_points"):
            value = getattr(self, attr)
            if isinstance(value, bool) or not isinstance(value, int):
                raise RulesConfigError(f"{attr} must be an integer, got {value!r}")
            if value < 0:
                raise RulesConfigError(f"{attr} must be >= 0, got {value}")
        if isinstance(self.tie_epsilon, bool) or not isinstance(self.tie_epsilon, (int, float)):
            raise RulesConfigError(f"tie_epsilon must be a number, got {self.tie_epsilon!r}")
        if not math.isfinite(self.tie_epsilon) or self.tie_epsilon < 0:
            raise RulesConfigError(f"tie_epsilon must be a finite number >= 0, got {self.tie_epsilon}")


_LEAGUE_RULES: Dict[str, LeagueRules] = {
    "DEFAULT": LeagueRules(
        name="DEFAULT",
        handicap_bonus=8,
        finalists_count=12,
        max_ranking_points=24,
    ),
    "SCRATCH": LeagueRules(
        name="SCRATCH",
        handicap_bonus=0,
        finalists_count=12,
        max_ranking_points=24,
    ),
}


def iter_rules() -> Iterable[LeagueRules]:
    """Return an iterator of all configured rule sets."""

    return _LEAGUE_RULES.values()


def get_rules(name: str = "default") -> LeagueRules:
    """Fetch a rule set by name, raising KeyError if missing."""

    key = name.upper()
    if key not in _LEAGUE_RULES:
        raise KeyError(f"No league rules configured for name={name!r}")
    return _LEAGUE_RULES[key]


DEFAULT_RULES = get_rules("default")


def rules_from_mapping(data: Mapping[str, Any], base: Optional[LeagueRules] = None) -> LeagueRules:
    """Overlay ``data`` on ``base`` (default rules) and validate the result."""

    base = base or DEFAULT_RULES
    allowed = {field.name for field in fields(LeagueRules)}
    unknown = sorted(set(data) - allowed)
    if unknown:
        raise RulesConfigError(f"Unknown rule keys: {', '.join(unknown)}")
    return replace(base, **dict(data))


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = environ.get(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default


def load_rules_from_env(
    base: Optional[LeagueRules] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> LeagueRules:
    """Apply ``BOWLRANK_*`` environment overrides to ``base``.

    Unparseable values are logged and ignored. The merged rule set is
    validated once here so the engine can treat its constants as sound.
    """

    base = base or DEFAULT_RULES
    env = os.environ if environ is None else environ
    overrides = {
        "handicap_bonus": _env_int(env, _HANDICAP_ENV, base.handicap_bonus),
        "finalists_count": _env_int(env, _FINALISTS_ENV, base.finalists_count),
        "max_ranking_points": _env_int(env, _MAX_POINTS_ENV, base.max_ranking_points),
        "tie_epsilon": _env_float(env, _TIE_EPSILON_ENV, base.tie_epsilon),
    }
    rules = replace(base, **overrides)
    if rules != base:
        logger.info(
            "League rules %s overridden from environment (handicap %s, finalists %s, max points %s, epsilon %s)",
            rules.name,
            rules.handicap_bonus,
            rules.finalists_count,
            rules.max_ranking_points,
            rules.tie_epsilon,
        )
    return rules
