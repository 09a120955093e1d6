"""Matching request flow: fetch idea and candidates, rank, write back.

The ranking is returned even when the write-back fails; persistence
errors are logged only.
"""

from __future__ import annotations

import logging

from ..database import SupabaseClient
from ..exceptions import IdeaNotFoundError
from ..matching import DEFAULT_WEIGHTS, MatchWeights, match_idea_to_profiles
from ..models import IdeaForMatching, MatchOutcome

logger = logging.getLogger(__name__)


def match_idea(
    db: SupabaseClient,
    idea_id: str,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> MatchOutcome:
    """Match one idea against the diaspora candidate pool.

    Args:
        db: Idea and profile store.
        idea_id: Idea to match.
        weights: Match weights and reference tables.

    Returns:
        MatchOutcome with up to five ranked matches.

    Raises:
        IdeaNotFoundError: If the idea does not exist.
    """
    idea = db.get_idea(idea_id)
    if idea is None:
        raise IdeaNotFoundError(idea_id)

    profiles = db.get_candidate_profiles()
    if not profiles:
        logger.info("No diaspora profiles available for idea %s", idea_id)
        return MatchOutcome(
            idea_id=idea_id,
            idea_title=idea.title,
            message="No diaspora profiles found",
        )

    matches = match_idea_to_profiles(IdeaForMatching.from_idea(idea), profiles, weights)

    persisted = False
    if matches:
        try:
            db.update_idea_matches(idea, matches)
            persisted = True
        except Exception as exc:
            logger.error("Failed to save matches for idea %s: %s", idea_id, exc)

    logger.info(
        "Idea %s: %d match(es) out of %d profiles, top score %d",
        idea_id,
        len(matches),
        len(profiles),
        matches[0].score if matches else 0,
    )

    return MatchOutcome(
        idea_id=idea_id,
        idea_title=idea.title,
        matches=matches,
        top_score=matches[0].score if matches else 0,
        total_profiles_checked=len(profiles),
        persisted=persisted,
        message=f"Found {len(matches)} matching diaspora profile(s)",
    )
