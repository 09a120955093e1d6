"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock, patch

import pytest

from fikra_engine.database.client import SupabaseClient
from fikra_engine.models import Idea, IdeaForMatching


@pytest.fixture
def health_idea():
    """Health idea from Casablanca whose submitter is a nurse."""
    return IdeaForMatching(
        id="idea-health-1",
        title="Clinique mobile pour quartiers populaires",
        status="analyzed",
        category="health",
        location="casablanca",
        submitter_skills=["nursing"],
    )


@pytest.fixture
def nurse_profile_row():
    """Raw diaspora profile row that matches health_idea on every component."""
    return {
        "id": "profile-nurse",
        "name": "Amina El Idrissi",
        "email": "amina@example.com",
        "expertise": ["health"],
        "skills": ["nursing"],
        "location": "casablanca",
        "willing_to_mentor": True,
        "willing_to_cofund": False,
        "attended_kenitra": False,
    }


@pytest.fixture
def unrelated_profile_row():
    """Raw profile row that scores zero against health_idea."""
    return {
        "id": "profile-banker",
        "name": "Youssef Benali",
        "email": "youssef@example.com",
        "expertise": ["finance"],
        "skills": [],
        "location": "paris",
        "willing_to_mentor": False,
        "willing_to_cofund": False,
        "attended_kenitra": False,
    }


@pytest.fixture
def stored_idea():
    """Idea row as returned by the idea store, not yet categorized."""
    return Idea(
        id="idea-health-1",
        title="Clinique mobile pour quartiers populaires",
        status="analyzed",
        problem_statement="Les patients attendent des heures",
        proposed_solution="Une clinique mobile",
        category="health",
        location="casablanca",
        estimated_cost="3K-5K",
        ai_capabilities_needed=["chatbot"],
        integration_points=["whatsapp"],
        submitter_skills=["nursing"],
    )


@pytest.fixture
def mock_db():
    """Idea store double with the SupabaseClient interface."""
    return MagicMock(spec=SupabaseClient)


@pytest.fixture
def mock_supabase_client():
    """Patch create_client so no real network call is made."""
    with patch("fikra_engine.database.client.create_client") as mock_create:
        mock_client = MagicMock()
        mock_create.return_value = mock_client
        client = SupabaseClient(url="https://fake.supabase.co", key="fake-key")
        yield client, mock_client
