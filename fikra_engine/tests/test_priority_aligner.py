"""Tests for the Anthropic-backed priority suggester.

The Messages endpoint is mocked with respx; no real API calls are made.
"""

import json

import anthropic
import httpx
import pytest
import respx
from tenacity import wait_none

from fikra_engine.llm import PrioritySuggester, parse_priority_codes
from fikra_engine.llm.priority_aligner import LLM_TIMEOUT

MESSAGES_URL = "https://api.anthropic.com/v1/messages"


def _message(text: str) -> dict:
    return {
        "id": "msg_test_001",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-5-sonnet-latest",
        "content": [{"type": "text", "text": text}],
        "stop_reason": "end_turn",
        "stop_sequence": None,
        "usage": {"input_tokens": 120, "output_tokens": 12},
    }


def _error(status: int, error_type: str) -> httpx.Response:
    return httpx.Response(
        status,
        json={"type": "error", "error": {"type": error_type, "message": "test error"}},
    )


@pytest.fixture
def suggester():
    return PrioritySuggester(api_key="test-key", wait=wait_none())


# ---------------------------------------------------------------------------
# parse_priority_codes
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("text,expected", [
    ('["digital_morocco", "green_morocco"]', ["digital_morocco", "green_morocco"]),
    ('Voici les codes: ["youth_employment"] .', ["youth_employment"]),
    ('["digital_morocco", 3, null]', ["digital_morocco"]),
    ("[]", []),
    ("Aucune priorité", []),
    ("[digital_morocco]", []),
])
def test_parse_priority_codes(text, expected):
    assert parse_priority_codes(text) == expected


# ---------------------------------------------------------------------------
# PrioritySuggester
# ---------------------------------------------------------------------------

def test_default_timeout_is_accepted_by_the_sdk_client():
    suggester = PrioritySuggester(api_key="test-key")

    assert suggester._client.timeout == LLM_TIMEOUT
    assert suggester._client.max_retries == 0


def test_float_timeout():
    suggester = PrioritySuggester(api_key="test-key", timeout=12.5)

    assert suggester._client.timeout == 12.5


@pytest.mark.asyncio
@respx.mock
async def test_suggest_returns_codes(suggester):
    route = respx.post(MESSAGES_URL).mock(
        return_value=httpx.Response(200, json=_message('["digital_morocco", "healthcare_improvement"]'))
    )

    codes = await suggester("Longues files d'attente", "Prise de rendez-vous en ligne", "health")

    assert codes == ["digital_morocco", "healthcare_improvement"]
    assert route.call_count == 1

    body = json.loads(route.calls.last.request.content)
    assert body["max_tokens"] == 200
    assert body["model"] == "claude-3-5-sonnet-latest"
    prompt = body["messages"][0]["content"]
    assert "Longues files d'attente" in prompt
    assert '"rural_development"' in prompt


@pytest.mark.asyncio
@respx.mock
async def test_rate_limit_is_retried(suggester):
    route = respx.post(MESSAGES_URL).mock(side_effect=[
        _error(429, "rate_limit_error"),
        httpx.Response(200, json=_message('["green_morocco"]')),
    ])

    codes = await suggester.suggest("Déchets plastiques", "Tri sélectif", "environment")

    assert codes == ["green_morocco"]
    assert route.call_count == 2


@pytest.mark.asyncio
@respx.mock
async def test_server_errors_exhaust_attempts(suggester):
    route = respx.post(MESSAGES_URL).mock(return_value=_error(500, "api_error"))

    with pytest.raises(anthropic.InternalServerError):
        await suggester.suggest("p", "s", "c")

    assert route.call_count == 3


@pytest.mark.asyncio
@respx.mock
async def test_client_errors_are_not_retried(suggester):
    route = respx.post(MESSAGES_URL).mock(return_value=_error(400, "invalid_request_error"))

    with pytest.raises(anthropic.BadRequestError):
        await suggester.suggest("p", "s", "c")

    assert route.call_count == 1


@pytest.mark.asyncio
@respx.mock
async def test_unparseable_reply_gives_empty_list(suggester):
    respx.post(MESSAGES_URL).mock(
        return_value=httpx.Response(200, json=_message("Je ne peux pas répondre."))
    )

    assert await suggester.suggest("p", "s", "c") == []
