"""Shared Pydantic models for idea categorization and mentor matching."""

from .idea import Idea, IdeaForMatching
from .category_tags import CategorizationRequest, CategoryTags, SDGAlignment
from .mentor_profile import MentorProfile
from .match_result import MatchOutcome, MatchReasoning, MatchResult
from .categorization_stats import CategorizationStats, FieldCoverage, UncategorizedIdea

__all__ = [
    "Idea",
    "IdeaForMatching",
    "CategorizationRequest",
    "CategoryTags",
    "SDGAlignment",
    "MentorProfile",
    "MatchOutcome",
    "MatchReasoning",
    "MatchResult",
    "CategorizationStats",
    "FieldCoverage",
    "UncategorizedIdea",
]
