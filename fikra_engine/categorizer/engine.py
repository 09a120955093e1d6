"""Rule-based auto-categorization engine for submitted ideas.

Rules run first (fast, no API calls); an injected priority suggester is
consulted only when the rules find no national priority.
"""

import logging
from typing import Awaitable, Callable, List, Optional

from ..models import CategorizationRequest, CategoryTags, SDGAlignment
from .rules import (
    AUDIENCE_MARKERS,
    MOROCCAN_PRIORITIES_MAP,
    PRIORITY_CODES,
    determine_complexity,
    determine_location_type,
    map_budget_tier,
)
from .sdg import map_priorities_to_sdgs

logger = logging.getLogger(__name__)

MAX_PRIORITIES = 3

SuggestPriorities = Callable[[str, str, str], Awaitable[List[str]]]


def detect_priorities(
    problem: Optional[str],
    solution: Optional[str],
    category: Optional[str],
    location: Optional[str],
) -> List[str]:
    """Detect national priorities from idea text using the rule tables.

    For each priority, in declared order, the first rule that fires adds it:
    exact category match, keyword substring, then audience markers.

    Returns:
        Up to three priority codes in declared order
    """

    text = f"{problem or ''} {solution or ''} {category or ''} {location or ''}".lower()
    cat = (category or "").lower()

    priorities: List[str] = []
    for code in PRIORITY_CODES:
        rules = MOROCCAN_PRIORITIES_MAP[code]

        if cat in rules["categories"]:
            priorities.append(code)
            continue

        if any(keyword.lower() in text for keyword in rules["keywords"]):
            priorities.append(code)
            continue

        if any(marker in text for marker in AUDIENCE_MARKERS.get(code, [])):
            priorities.append(code)

    return priorities[:MAX_PRIORITIES]


def clean_suggestions(suggested: object) -> List[str]:
    """Keep known priority codes only, first occurrence wins."""
    if not isinstance(suggested, (list, tuple)):
        return []
    cleaned: List[str] = []
    for code in suggested:
        if code in MOROCCAN_PRIORITIES_MAP and code not in cleaned:
            cleaned.append(code)
    return cleaned[:MAX_PRIORITIES]


async def resolve_priorities(
    problem: Optional[str],
    solution: Optional[str],
    category: Optional[str],
    location: Optional[str],
    suggest_priorities: Optional[SuggestPriorities] = None,
    use_ai_fallback: bool = True,
) -> List[str]:
    """Rule-detected priorities, or the cleaned suggester answer when rules find none.

    A failing suggester is logged and yields [].
    """

    priorities = detect_priorities(problem, solution, category, location)
    if priorities or not use_ai_fallback:
        return priorities

    if suggest_priorities is None:
        logger.debug("No rule-based priority and no suggester configured")
        return []

    try:
        suggested = await suggest_priorities(problem or "", solution or "", category or "")
    except Exception as exc:
        logger.warning("Priority suggester failed, continuing without priorities: %s", exc)
        return []

    priorities = clean_suggestions(suggested)
    logger.info("Priority suggester returned %s", priorities)
    return priorities


def build_sdg_alignment(priorities: List[str]) -> Optional[SDGAlignment]:
    """SDG alignment for a priority list; None when there are no priorities."""
    if not priorities:
        return None
    sdg_tags, confidence = map_priorities_to_sdgs(priorities)
    return SDGAlignment(
        sdg_tags=sdg_tags,
        sdg_auto_tagged=True,
        sdg_confidence=confidence,
        morocco_priorities=list(priorities),
    )


async def auto_categorize_idea(
    request: CategorizationRequest,
    suggest_priorities: Optional[SuggestPriorities] = None,
) -> CategoryTags:
    """Categorize an idea: priorities, budget tier, location type, complexity, SDGs.

    Args:
        request: Idea fields to categorize
        suggest_priorities: Async fallback ``(problem, solution, category) -> codes``,
            called only when rules find nothing and ``request.use_ai_fallback`` is set.
            Timeouts and retries are the suggester's business.

    Returns:
        CategoryTags; never raises
    """

    priorities = await resolve_priorities(
        request.problem_statement,
        request.proposed_solution,
        request.category,
        request.location,
        suggest_priorities,
        request.use_ai_fallback,
    )

    budget_tier = map_budget_tier(request.estimated_cost)
    location_type = determine_location_type(
        request.location,
        request.category,
        request.problem_statement,
    )
    complexity = determine_complexity(
        request.ai_capabilities_needed,
        request.integration_points,
        budget_tier,
    )

    return CategoryTags(
        moroccan_priorities=priorities,
        budget_tier=budget_tier,
        location_type=location_type,
        complexity=complexity,
        sdg_alignment=build_sdg_alignment(priorities),
    )
