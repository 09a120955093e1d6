"""Categorization flows over the idea store: single idea and backfill."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from ..categorizer import (
    SuggestPriorities,
    auto_categorize_idea,
    build_sdg_alignment,
    determine_complexity,
    determine_location_type,
    map_budget_tier,
    resolve_priorities,
)
from ..database import SupabaseClient
from ..exceptions import IdeaNotFoundError
from ..models import CategorizationRequest, CategoryTags, Idea

logger = logging.getLogger(__name__)


async def categorize_idea(
    db: SupabaseClient,
    idea_id: str,
    suggest_priorities: Optional[SuggestPriorities] = None,
    use_ai_fallback: bool = True,
) -> CategoryTags:
    """Categorize one stored idea and persist the tags.

    Raises:
        IdeaNotFoundError: If the idea does not exist.
    """
    idea = db.get_idea(idea_id)
    if idea is None:
        raise IdeaNotFoundError(idea_id)

    tags = await auto_categorize_idea(
        CategorizationRequest.from_idea(idea, use_ai_fallback=use_ai_fallback),
        suggest_priorities,
    )
    db.save_category_tags(idea_id, tags)
    return tags


async def _missing_fields(
    idea: Idea,
    suggest_priorities: Optional[SuggestPriorities],
) -> Dict[str, Any]:
    """Compute only the derived columns the idea does not carry yet."""
    payload: Dict[str, Any] = {}

    if not idea.moroccan_priorities:
        priorities = await resolve_priorities(
            idea.problem_statement,
            idea.proposed_solution,
            idea.category,
            idea.location,
            suggest_priorities,
        )
        if priorities:
            payload["moroccan_priorities"] = priorities
            payload["sdg_alignment"] = build_sdg_alignment(priorities).model_dump(by_alias=True)

    budget_tier = idea.budget_tier or map_budget_tier(idea.estimated_cost)
    if not idea.budget_tier and budget_tier:
        payload["budget_tier"] = budget_tier

    if not idea.location_type:
        location_type = determine_location_type(idea.location, idea.category, idea.problem_statement)
        if location_type:
            payload["location_type"] = location_type

    if not idea.complexity:
        complexity = determine_complexity(
            idea.ai_capabilities_needed, idea.integration_points, budget_tier
        )
        if complexity:
            payload["complexity"] = complexity

    return payload


def _is_fully_categorized(idea: Idea) -> bool:
    return bool(
        idea.moroccan_priorities
        and idea.budget_tier
        and idea.location_type
        and idea.complexity
    )


async def backfill_categorization(
    db: SupabaseClient,
    suggest_priorities: Optional[SuggestPriorities] = None,
    page_size: int = 25,
) -> Dict[str, int]:
    """Fill missing categorization columns on every stored idea.

    Ideas that already carry all four columns are skipped. Existing values
    are never overwritten. A failure on one idea is logged and counted as
    skipped; the run continues.

    Returns:
        {"processed": n, "updated": n, "skipped": n}
    """
    processed = updated = skipped = 0
    offset = 0

    while True:
        ideas = db.list_ideas(offset=offset, limit=page_size)
        if not ideas:
            break

        for idea in ideas:
            processed += 1
            if _is_fully_categorized(idea):
                skipped += 1
                continue
            try:
                payload = await _missing_fields(idea, suggest_priorities)
                if not payload:
                    skipped += 1
                    continue
                db.update_idea_categorization(idea.id, payload)
                updated += 1
            except Exception as exc:
                logger.error("Backfill failed for idea %s: %s", idea.id, exc)
                skipped += 1

        if len(ideas) < page_size:
            break
        offset += page_size

    logger.info(
        "Backfill complete: %d processed, %d updated, %d skipped",
        processed, updated, skipped,
    )
    return {"processed": processed, "updated": updated, "skipped": skipped}
