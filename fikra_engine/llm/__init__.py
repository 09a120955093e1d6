"""LLM collaborators used as fallbacks by the rule engines."""

from .priority_aligner import PrioritySuggester, parse_priority_codes

__all__ = ["PrioritySuggester", "parse_priority_codes"]
