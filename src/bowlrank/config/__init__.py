"""Configuration helpers for league rule sets."""

from .rules import (
    DEFAULT_RULES,
    LeagueRules,
    RulesConfigError,
    get_rules,
    iter_rules,
    load_rules_from_env,
    rules_from_mapping,
)

__all__ = [
    "DEFAULT_RULES",
    "LeagueRules",
    "RulesConfigError",
    "get_rules",
    "iter_rules",
    "load_rules_from_env",
    "rules_from_mapping",
]
