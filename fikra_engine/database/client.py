"""Supabase database client for ideas and diaspora profiles."""

import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from supabase import Client, create_client

from ..models import CategoryTags, Idea, MatchResult, MentorProfile

logger = logging.getLogger(__name__)

IDEAS_TABLE = "marrai_ideas"
PROFILES_TABLE = "marrai_diaspora_profiles"

# Candidates must offer some form of help
CANDIDATE_FILTER = "willing_to_mentor.eq.true,willing_to_cofund.eq.true,attended_kenitra.eq.true"

CATEGORIZATION_COLUMNS = (
    "id, title, created_at, moroccan_priorities, budget_tier, "
    "location_type, complexity, sdg_alignment"
)


class SupabaseClient:
    """Client for the marrai_ideas and marrai_diaspora_profiles tables."""

    def __init__(
        self,
        url: Optional[str] = None,
        key: Optional[str] = None,
    ) -> None:
        """Initialize Supabase client from explicit args or env vars.

        Args:
            url: Supabase project URL (falls back to SUPABASE_URL env var).
            key: Supabase service key (falls back to SUPABASE_KEY env var).
        """
        self._url = url or os.environ["SUPABASE_URL"]
        self._key = key or os.environ["SUPABASE_KEY"]
        self._client: Client = create_client(self._url, self._key)

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get_idea(self, idea_id: str) -> Optional[Idea]:
        """Fetch one idea by id.

        Returns:
            The Idea, or None when no row matches.
        """
        response = (
            self._client.table(IDEAS_TABLE)
            .select("*")
            .eq("id", idea_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return Idea(**response.data[0])

    def get_candidate_profiles(self) -> List[Dict[str, Any]]:
        """Fetch diaspora profiles willing to mentor, cofund, or who attended the workshop.

        Rows are returned raw; the match engine normalizes them.
        """
        response = (
            self._client.table(PROFILES_TABLE)
            .select("*")
            .or_(CANDIDATE_FILTER)
            .execute()
        )
        return list(response.data or [])

    def list_ideas(self, offset: int = 0, limit: int = 25) -> List[Idea]:
        """Fetch a page of ideas, oldest first."""
        response = (
            self._client.table(IDEAS_TABLE)
            .select("*")
            .order("created_at")
            .range(offset, offset + limit - 1)
            .execute()
        )
        return [Idea(**row) for row in response.data or []]

    def get_categorization_rows(self) -> List[Dict[str, Any]]:
        """Fetch the derived categorization columns of every idea."""
        response = (
            self._client.table(IDEAS_TABLE)
            .select(CATEGORIZATION_COLUMNS)
            .execute()
        )
        return list(response.data or [])

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def update_idea_matches(
        self,
        idea: Idea,
        matches: List[MatchResult],
    ) -> Dict[str, Any]:
        """Write the top matches back onto the idea.

        Status moves from 'analyzed' to 'matched'; any other status is kept.

        Args:
            idea: The matched idea (its current status drives the transition).
            matches: Ranked matches, best first. Must not be empty.

        Returns:
            The updated row as a dict, or empty dict if not found.
        """
        record = {
            "matched_diaspora": [m.profile_id for m in matches],
            "matching_score": matches[0].score,
            "matched_at": datetime.now(timezone.utc).isoformat(),
            "status": "matched" if idea.status == "analyzed" else idea.status,
        }
        response = (
            self._client.table(IDEAS_TABLE)
            .update(record)
            .eq("id", idea.id)
            .execute()
        )
        logger.info(
            "Saved %d matches for idea %s (top score %d)",
            len(matches), idea.id, record["matching_score"],
        )
        return response.data[0] if response.data else {}

    def update_idea_categorization(
        self,
        idea_id: str,
        fields: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Write derived categorization columns onto an idea.

        Args:
            idea_id: Idea to update.
            fields: Column values, e.g. from CategoryTags.to_update_payload().

        Returns:
            The updated row as a dict, or empty dict if not found.
        """
        response = (
            self._client.table(IDEAS_TABLE)
            .update(fields)
            .eq("id", idea_id)
            .execute()
        )
        logger.info("Updated categorization of idea %s: %s", idea_id, sorted(fields))
        return response.data[0] if response.data else {}

    def save_category_tags(self, idea_id: str, tags: CategoryTags) -> Dict[str, Any]:
        """Persist a full CategoryTags result onto an idea."""
        return self.update_idea_categorization(idea_id, tags.to_update_payload())
