"""Rule-based categorization of ideas by national priority, budget, location and complexity."""

from .engine import (
    auto_categorize_idea,
    build_sdg_alignment,
    clean_suggestions,
    detect_priorities,
    resolve_priorities,
    SuggestPriorities,
)
from .rules import (
    BUDGET_TIERS,
    COMPLEXITY_LEVELS,
    LOCATION_TYPES,
    MOROCCAN_PRIORITIES_MAP,
    PRIORITY_CODES,
    map_budget_tier,
    determine_location_type,
    determine_complexity,
)
from .sdg import PRIORITY_TO_SDG, SDG_INFO, map_priorities_to_sdgs, describe_sdgs

__all__ = [
    "auto_categorize_idea",
    "build_sdg_alignment",
    "detect_priorities",
    "clean_suggestions",
    "resolve_priorities",
    "SuggestPriorities",
    "BUDGET_TIERS",
    "COMPLEXITY_LEVELS",
    "LOCATION_TYPES",
    "MOROCCAN_PRIORITIES_MAP",
    "PRIORITY_CODES",
    "map_budget_tier",
    "determine_location_type",
    "determine_complexity",
    "PRIORITY_TO_SDG",
    "SDG_INFO",
    "map_priorities_to_sdgs",
    "describe_sdgs",
]
