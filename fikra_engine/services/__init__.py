"""Service flows that combine the engines with the idea store."""

from .categorization_service import backfill_categorization, categorize_idea
from .matching_service import match_idea
from .stats import categorization_report, compute_categorization_stats

__all__ = [
    "backfill_categorization",
    "categorize_idea",
    "match_idea",
    "categorization_report",
    "compute_categorization_stats",
]
