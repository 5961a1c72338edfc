"""Google Gemini wrapper implementing the Oracle capability.

The engine only depends on the ``Oracle`` protocol, so tests inject a
deterministic fake. Failures are raised as typed errors rather than
returned as empty results, so "could not compute" never looks like a
legitimate zero score.
"""

import asyncio
import json
import logging
import re
from typing import Any, Protocol

from google import genai
from google.genai import types

from config import settings
from services.errors import MalformedOracleResponse, OracleUnavailable

logger = logging.getLogger(__name__)

_OBJECT_RE = re.compile(r"\{.*\}", re.DOTALL)

_client: genai.Client | None = None


class Oracle(Protocol):
    async def generate_json(self, prompt: str) -> Any:
        """Send a prompt and return the parsed JSON payload."""

    async def generate_text(self, prompt: str) -> str:
        """Send a prompt and return the plain text answer."""


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - oracle disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def parse_json_response(text: str | None) -> Any:
    """Parse an LLM answer as JSON, tolerating code fences and chatter around an object."""
    if text is None:
        raise MalformedOracleResponse("Oracle returned an empty response")
    text = text.strip()
    # Strip markdown code fences if present
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else text[3:]
        if text.endswith("```"):
            text = text[:-3]
        text = text.strip()

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        match = _OBJECT_RE.search(text)
        if match:
            try:
                return json.loads(match.group(0))
            except json.JSONDecodeError:
                pass
        logger.error("Failed to parse oracle response as JSON: %s", e)
        raise MalformedOracleResponse("Oracle response is not valid JSON") from e


class GeminiOracle:
    def __init__(self, client: genai.Client | None = None, model: str | None = None) -> None:
        self._client = client
        self._model = model or settings.gemini_model

    async def _generate(self, prompt: str, temperature: float) -> str | None:
        client = self._client or get_client()
        if client is None:
            raise OracleUnavailable("Oracle is not configured (GEMINI_API_KEY missing)")

        try:
            response = await asyncio.wait_for(
                client.aio.models.generate_content(
                    model=self._model,
                    contents=prompt,
                    config=types.GenerateContentConfig(
                        temperature=temperature,
                        max_output_tokens=settings.oracle_max_output_tokens,
                    ),
                ),
                timeout=settings.oracle_timeout_seconds,
            )
        except asyncio.TimeoutError as e:
            logger.error("Gemini call timed out after %ss", settings.oracle_timeout_seconds)
            raise OracleUnavailable("Oracle timed out") from e
        except Exception as e:
            logger.error("Gemini API error: %s", e)
            raise OracleUnavailable(f"Oracle call failed: {e}") from e

        return response.text

    async def generate_json(self, prompt: str) -> Any:
        text = await self._generate(prompt, settings.oracle_temperature)
        return parse_json_response(text)

    async def generate_text(self, prompt: str) -> str:
        # Prose generation runs at temperature >= 0.7
        text = await self._generate(prompt, max(settings.oracle_temperature, 0.7))
        if not text or not text.strip():
            raise MalformedOracleResponse("Oracle returned an empty response")
        return text.strip()
