"""Tests for database.client (SupabaseClient).

Mocks are used here in tests only; production code uses real Supabase calls.
"""

import os
from unittest.mock import MagicMock, patch

import pytest

from fikra_engine.database.client import CANDIDATE_FILTER, SupabaseClient
from fikra_engine.models import CategoryTags, Idea, MatchReasoning, MatchResult, SDGAlignment


def _response(data):
    response = MagicMock()
    response.data = data
    return response


@pytest.fixture
def matches():
    return [
        MatchResult(profile_id="p-1", profile_name="Amina", score=93, reasoning=MatchReasoning()),
        MatchResult(profile_id="p-2", profile_name="Youssef", score=40, reasoning=MatchReasoning()),
    ]


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


def test_credentials_fall_back_to_environment():
    env = {"SUPABASE_URL": "https://env.supabase.co", "SUPABASE_KEY": "env-key"}
    with patch.dict(os.environ, env), patch("fikra_engine.database.client.create_client") as mock_create:
        SupabaseClient()

    mock_create.assert_called_once_with("https://env.supabase.co", "env-key")


class TestGetIdea:
    def test_returns_idea(self, mock_supabase_client):
        client, mock_sb = mock_supabase_client
        chain = mock_sb.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value = _response([{
            "id": "idea-1",
            "title": "Clinique mobile",
            "category": "health",
            "submitter_skills": ["nursing"],
            "created_at": "2025-03-01T10:00:00Z",
        }])

        idea = client.get_idea("idea-1")

        assert isinstance(idea, Idea)
        assert idea.category == "health"
        assert idea.submitter_skills == ["nursing"]
        mock_sb.table.assert_called_with("marrai_ideas")
        mock_sb.table.return_value.select.return_value.eq.assert_called_with("id", "idea-1")

    def test_returns_none_when_missing(self, mock_supabase_client):
        client, mock_sb = mock_supabase_client
        chain = mock_sb.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value = _response([])

        assert client.get_idea("missing") is None

    def test_loose_list_columns_become_none(self, mock_supabase_client):
        client, mock_sb = mock_supabase_client
        chain = mock_sb.table.return_value.select.return_value.eq.return_value.limit.return_value
        chain.execute.return_value = _response([{"id": "idea-1", "submitter_skills": "nursing"}])

        assert client.get_idea("idea-1").submitter_skills is None


class TestGetCandidateProfiles:
    def test_filters_on_willingness(self, mock_supabase_client):
        client, mock_sb = mock_supabase_client
        rows = [{"id": "p-1", "willing_to_mentor": True}]
        mock_sb.table.return_value.select.return_value.or_.return_value.execute.return_value = _response(rows)

        result = client.get_candidate_profiles()

        assert result == rows
        mock_sb.table.assert_called_with("marrai_diaspora_profiles")
        mock_sb.table.return_value.select.return_value.or_.assert_called_once_with(CANDIDATE_FILTER)

    def test_no_rows(self, mock_supabase_client):
        client, mock_sb = mock_supabase_client
        mock_sb.table.return_value.select.return_value.or_.return_value.execute.return_value = _response(None)

        assert client.get_candidate_profiles() == []


class TestListIdeas:
    def test_pages_by_range(self, mock_supabase_client):
        client, mock_sb = mock_supabase_client
        order = mock_sb.table.return_value.select.return_value.order.return_value
        order.range.return_value.execute.return_value = _response([{"id": "idea-26"}])

        ideas = client.list_ideas(offset=25, limit=25)

        assert [i.id for i in ideas] == ["idea-26"]
        mock_sb.table.return_value.select.return_value.order.assert_called_once_with("created_at")
        order.range.assert_called_once_with(25, 49)


class TestUpdateIdeaMatches:
    def test_analyzed_idea_becomes_matched(self, mock_supabase_client, matches):
        client, mock_sb = mock_supabase_client
        mock_sb.table.return_value.update.return_value.eq.return_value.execute.return_value = _response(
            [{"id": "idea-1", "status": "matched"}]
        )

        result = client.update_idea_matches(Idea(id="idea-1", status="analyzed"), matches)

        record = mock_sb.table.return_value.update.call_args[0][0]
        assert record["matched_diaspora"] == ["p-1", "p-2"]
        assert record["matching_score"] == 93
        assert record["status"] == "matched"
        assert "matched_at" in record
        mock_sb.table.return_value.update.return_value.eq.assert_called_once_with("id", "idea-1")
        assert result == {"id": "idea-1", "status": "matched"}

    @pytest.mark.parametrize("status", ["submitted", "matched", "funded"])
    def test_other_statuses_are_kept(self, mock_supabase_client, matches, status):
        client, mock_sb = mock_supabase_client
        mock_sb.table.return_value.update.return_value.eq.return_value.execute.return_value = _response([])

        result = client.update_idea_matches(Idea(id="idea-1", status=status), matches)

        record = mock_sb.table.return_value.update.call_args[0][0]
        assert record["status"] == status
        assert result == {}


class TestUpdateCategorization:
    def test_partial_update(self, mock_supabase_client):
        client, mock_sb = mock_supabase_client
        mock_sb.table.return_value.update.return_value.eq.return_value.execute.return_value = _response(
            [{"id": "idea-1", "budget_tier": "1K-5K"}]
        )

        client.update_idea_categorization("idea-1", {"budget_tier": "1K-5K"})

        mock_sb.table.return_value.update.assert_called_once_with({"budget_tier": "1K-5K"})
        mock_sb.table.return_value.update.return_value.eq.assert_called_once_with("id", "idea-1")

    def test_save_category_tags(self, mock_supabase_client):
        client, mock_sb = mock_supabase_client
        mock_sb.table.return_value.update.return_value.eq.return_value.execute.return_value = _response([])
        tags = CategoryTags(
            moroccan_priorities=["healthcare_improvement"],
            budget_tier="1K-5K",
            location_type="urban",
            complexity="beginner",
            sdg_alignment=SDGAlignment(
                sdg_tags=[3],
                sdg_confidence={"sdg_3": 0.9},
                morocco_priorities=["healthcare_improvement"],
            ),
        )

        client.save_category_tags("idea-1", tags)

        record = mock_sb.table.return_value.update.call_args[0][0]
        assert record["moroccan_priorities"] == ["healthcare_improvement"]
        assert record["complexity"] == "beginner"
        assert record["sdg_alignment"]["sdgTags"] == [3]
        assert record["sdg_alignment"]["moroccoPriorities"] == ["healthcare_improvement"]
