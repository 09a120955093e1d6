"""Weighted matching of ideas to diaspora mentor profiles."""

from .engine import calculate_match_score, match_idea_to_profiles, MAX_MATCHES
from .weights import (
    DEFAULT_WEIGHTS,
    DEFAULT_MOROCCAN_CITIES,
    DEFAULT_RELATED_CATEGORIES,
    MatchWeights,
    load_match_config,
    save_match_config,
)

__all__ = [
    "calculate_match_score",
    "match_idea_to_profiles",
    "MAX_MATCHES",
    "DEFAULT_WEIGHTS",
    "DEFAULT_MOROCCAN_CITIES",
    "DEFAULT_RELATED_CATEGORIES",
    "MatchWeights",
    "load_match_config",
    "save_match_config",
]
