"""Anthropic-backed national priority suggester.

Used as the fallback collaborator of the categorizer when rules find no
priority. Timeout and retry policy live here, not in the engine.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Optional

import anthropic
import httpx
from tenacity import (
    AsyncRetrying,
    before_sleep_log,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)
from tenacity.wait import wait_base

from ..categorizer.rules import PRIORITY_CODES
from .prompts import build_priority_prompt

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "claude-3-5-sonnet-latest"

# Bounded calls: short connect, generous read for a 200-token answer
LLM_TIMEOUT = httpx.Timeout(30.0, connect=10.0)

RETRYABLE_ERRORS = (
    anthropic.APIConnectionError,
    anthropic.RateLimitError,
    anthropic.InternalServerError,
)

_JSON_ARRAY = re.compile(r"\[[\s\S]*\]")


def parse_priority_codes(text: str) -> list[str]:
    """Extract the JSON array of codes from a model reply.

    Stray text around the array is tolerated; anything unparseable gives [].
    """
    match = _JSON_ARRAY.search(text.strip())
    if not match:
        return []
    try:
        arr = json.loads(match.group(0))
    except json.JSONDecodeError:
        return []
    if not isinstance(arr, list):
        return []
    return [code for code in arr if isinstance(code, str)]


class PrioritySuggester:
    """Callable ``(problem, solution, category) -> list[str]`` backed by Claude."""

    def __init__(
        self,
        api_key: Optional[str] = None,
        model: str = DEFAULT_MODEL,
        timeout: httpx.Timeout | float = LLM_TIMEOUT,
        max_attempts: int = 3,
        wait: Optional[wait_base] = None,
        client: Optional[anthropic.AsyncAnthropic] = None,
    ) -> None:
        """Initialize from an explicit key or ANTHROPIC_API_KEY.

        Args:
            api_key: Anthropic API key (falls back to the SDK's env lookup).
            model: Model identifier.
            timeout: Per-request timeout.
            max_attempts: Attempts for retryable API errors.
            wait: Backoff between attempts (default exponential, 2-10s).
            client: Pre-built async client (tests).
        """
        self.model = model
        self.max_attempts = max_attempts
        self.wait = wait or wait_exponential(multiplier=1, min=2, max=10)
        # SDK retries are disabled; tenacity owns the retry policy
        self._client = client or anthropic.AsyncAnthropic(
            api_key=api_key,
            timeout=timeout,
            max_retries=0,
        )

    async def __call__(self, problem: str, solution: str, category: str) -> list[str]:
        return await self.suggest(problem, solution, category)

    async def suggest(self, problem: str, solution: str, category: str) -> list[str]:
        """Ask the model for priority codes.

        Raises:
            anthropic.APIError: when the API keeps failing after retries.
        """
        prompt = build_priority_prompt(problem, solution, category, PRIORITY_CODES)

        async for attempt in AsyncRetrying(
            stop=stop_after_attempt(self.max_attempts),
            wait=self.wait,
            retry=retry_if_exception_type(RETRYABLE_ERRORS),
            before_sleep=before_sleep_log(logger, logging.WARNING),
            reraise=True,
        ):
            with attempt:
                response = await self._client.messages.create(
                    model=self.model,
                    max_tokens=200,
                    temperature=0.2,
                    messages=[{"role": "user", "content": prompt}],
                )

        if not response.content:
            return []
        block = response.content[0]
        if getattr(block, "type", None) != "text":
            return []

        codes = parse_priority_codes(block.text)
        logger.debug("Model %s suggested priorities %s", self.model, codes)
        return codes
