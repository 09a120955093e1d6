"""Diaspora mentor matching engine.

Scores every candidate profile against one idea on four components
(expertise, skills, location, willingness) and keeps the best five.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Tuple, Union

from pydantic import ValidationError

from ..models import Idea, IdeaForMatching, MatchReasoning, MatchResult, MentorProfile
from .weights import DEFAULT_WEIGHTS, MatchWeights

logger = logging.getLogger(__name__)

MAX_MATCHES = 5

ProfileInput = Union[MentorProfile, dict]
IdeaInput = Union[IdeaForMatching, Idea, dict]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _score_expertise(
    idea: IdeaForMatching, profile: MentorProfile, weights: MatchWeights, details: list[str]
) -> int:
    if not idea.category or not profile.expertise:
        details.append("Données d'expertise manquantes")
        return 0

    idea_category = idea.category.lower()
    expertise = [e.lower() for e in profile.expertise]

    if idea_category in expertise:
        details.append(f"Correspondance directe: {idea.category}")
        return weights.expertise_exact

    related = weights.related_categories.get(idea_category, [])
    has_related = any(
        exp in rel or rel in exp
        for exp in expertise
        for rel in related
    )
    if has_related:
        details.append(f"Correspondance partielle: {idea.category}")
        return weights.expertise_related

    details.append("Aucune correspondance d'expertise")
    return 0


def _score_skills(
    idea: IdeaForMatching, profile: MentorProfile, weights: MatchWeights, details: list[str]
) -> int:
    idea_skills = idea.submitter_skills
    profile_skills = profile.skills

    if not idea_skills or not profile_skills:
        details.append("Données de compétences manquantes")
        return 0

    profile_lower = [s.lower() for s in profile_skills]
    matching = [
        skill for skill in (s.lower() for s in idea_skills)
        if any(p in skill or skill in p for p in profile_lower)
    ]

    if not matching:
        details.append("Aucune compétence correspondante")
        return 0

    ratio = len(matching) / max(len(idea_skills), len(profile_skills))
    details.append(f"{len(matching)} compétence(s) correspondante(s): {', '.join(matching)}")
    return _round_half_up(weights.skill_max * ratio)


def _score_location(
    idea: IdeaForMatching, profile: MentorProfile, weights: MatchWeights, details: list[str]
) -> int:
    if not idea.location or not profile.location:
        details.append("Données de localisation manquantes")
        return 0

    idea_location = idea.location.lower()
    profile_location = profile.location.lower()

    if idea_location == profile_location:
        details.append(f"Même localisation: {idea.location}")
        return weights.location_exact

    cities = weights.moroccan_cities
    if idea_location in cities and profile_location in cities:
        details.append(f"Même pays (Maroc): {idea.location} ↔ {profile.location}")
        return weights.location_same_country

    details.append(f"Localisations différentes: {idea.location} ↔ {profile.location}")
    return 0


def _score_willingness(profile: MentorProfile, weights: MatchWeights, details: list[str]) -> int:
    score = 0
    if profile.willing_to_mentor:
        score += weights.willing_to_mentor
        details.append("Disponible pour mentorat")
    if profile.willing_to_cofund:
        score += weights.willing_to_cofund
        details.append("Disponible pour cofinancement")
    if profile.attended_workshop:
        score += weights.workshop_bonus
        details.append("A participé à l'atelier de Kenitra")
    return min(score, weights.willingness_cap)


def calculate_match_score(
    idea: IdeaForMatching,
    profile: MentorProfile,
    weights: MatchWeights = DEFAULT_WEIGHTS,
) -> Tuple[int, MatchReasoning]:
    """Score one profile against one idea.

    Components:
    1. Expertise overlap (default 40, 25 for a related category)
    2. Skill overlap (default up to 30, proportional)
    3. Location proximity (default 15 same city, 10 both Moroccan cities)
    4. Willingness to help (mentor 8 + cofund 7 + workshop 2, capped at 15)

    Returns:
        (score, reasoning) with score in [0, total_cap]
    """

    details: list[str] = []
    reasoning = MatchReasoning(
        expertise_overlap=_score_expertise(idea, profile, weights, details),
        skill_overlap=_score_skills(idea, profile, weights, details),
        location_proximity=_score_location(idea, profile, weights, details),
        willingness_to_help=_score_willingness(profile, weights, details),
        details=details,
    )

    total = (
        reasoning.expertise_overlap
        + reasoning.skill_overlap
        + reasoning.location_proximity
        + reasoning.willingness_to_help
    )
    return max(0, min(total, weights.total_cap)), reasoning


def _as_profile(raw: Any) -> MentorProfile | None:
    if isinstance(raw, MentorProfile):
        return raw
    try:
        return MentorProfile.model_validate(raw)
    except ValidationError as exc:
        logger.warning("Skipping malformed profile %r: %s", raw, exc)
        return None


def _as_idea(raw: IdeaInput) -> IdeaForMatching:
    if isinstance(raw, IdeaForMatching):
        return raw
    if isinstance(raw, Idea):
        return IdeaForMatching.from_idea(raw)
    try:
        return IdeaForMatching.model_validate(raw)
    except ValidationError as exc:
        # An unreadable idea matches nothing but willingness points
        logger.warning("Malformed idea %r, scoring without idea fields: %s", raw, exc)
        return IdeaForMatching()


def match_idea_to_profiles(
    idea: IdeaInput,
    profiles: Iterable[ProfileInput],
    weights: MatchWeights = DEFAULT_WEIGHTS,
    limit: int = MAX_MATCHES,
) -> list[MatchResult]:
    """Rank candidate profiles for an idea.

    Only positive scores are kept. Sorting is stable, so equal scores keep
    their input order.

    Args:
        idea: Idea to match (model or raw row)
        profiles: MentorProfile instances or raw profile rows
        weights: Scoring weights and reference tables
        limit: Maximum number of matches returned

    Returns:
        Up to ``limit`` MatchResult, best first
    """

    profiles = list(profiles)
    if not profiles:
        return []

    idea = _as_idea(idea)

    scored: list[MatchResult] = []
    for raw in profiles:
        profile = _as_profile(raw)
        if profile is None:
            continue
        score, reasoning = calculate_match_score(idea, profile, weights)
        if score <= 0:
            continue
        scored.append(
            MatchResult(
                profile_id=profile.id,
                profile_name=profile.display_name,
                profile_email=profile.email,
                score=score,
                reasoning=reasoning,
            )
        )

    ranked = sorted(scored, key=lambda m: m.score, reverse=True)

    logger.debug(
        "Matched idea %s: %d/%d profiles scored above zero (weights v%s)",
        idea.id,
        len(scored),
        len(profiles),
        weights.version,
    )
    return ranked[:limit]
