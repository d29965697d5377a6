"""Google Gemini API wrapper with rate-limit retry and JSON salvage."""

import asyncio
import json
import logging
import re
from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from google import genai
from google.genai import types

from config import settings

logger = logging.getLogger(__name__)

T = TypeVar("T")

_client: genai.Client | None = None

# Lower-cased fragments that mark a quota / rate-limit failure
RATE_LIMIT_MARKERS = ("429", "rate limit", "resource_exhausted", "resource exhausted")

_FENCE_RE = re.compile(r"```(?:json)?")


class LLMNotConfiguredError(RuntimeError):
    """Raised when a Gemini call is attempted without GEMINI_API_KEY."""


def get_client() -> genai.Client | None:
    global _client
    if not settings.gemini_api_key:
        logger.warning("No GEMINI_API_KEY set - Gemini features disabled")
        return None
    if _client is None:
        _client = genai.Client(api_key=settings.gemini_api_key)
    return _client


def reset_client() -> None:
    """Drop the cached client. Useful for testing."""
    global _client
    _client = None


def is_rate_limit_error(exc: BaseException) -> bool:
    if getattr(exc, "code", None) == 429:
        return True
    message = str(exc).lower()
    return any(marker in message for marker in RATE_LIMIT_MARKERS)


async def with_retry(
    fn: Callable[[], Awaitable[T]],
    retries: int | None = None,
    delay: float | None = None,
) -> T:
    """Await ``fn()``, retrying rate-limit failures with exponential backoff.

    Any other exception, or a rate-limit failure once the retry budget is
    spent, propagates to the caller.
    """
    retries = settings.llm_max_retries if retries is None else retries
    delay = settings.llm_retry_delay_seconds if delay is None else delay

    while True:
        try:
            return await fn()
        except Exception as e:
            if retries > 0 and is_rate_limit_error(e):
                logger.warning("Rate limit hit. Retrying in %.1fs...", delay)
                await asyncio.sleep(delay)
                retries -= 1
                delay *= 2
                continue
            raise


async def generate_text(
    prompt: str,
    system_prompt: str | None = None,
    temperature: float | None = None,
) -> str:
    """Send one prompt to Gemini and return the stripped reply text."""
    client = get_client()
    if client is None:
        raise LLMNotConfiguredError("GEMINI_API_KEY is not set")

    response = await client.aio.models.generate_content(
        model=settings.gemini_model,
        contents=prompt,
        config=types.GenerateContentConfig(
            system_instruction=system_prompt,
            temperature=settings.llm_temperature if temperature is None else temperature,
            max_output_tokens=settings.llm_max_output_tokens,
        ),
    )
    return (response.text or "").strip()


def extract_json(text: str) -> str | None:
    """Return the outermost ``{...}`` span of a reply, ignoring code fences."""
    clean = _FENCE_RE.sub("", text).strip()
    start = clean.find("{")
    end = clean.rfind("}")
    if start == -1 or end == -1 or end <= start:
        return None
    return clean[start:end + 1]


def safe_parse(text: str, fallback: dict[str, Any]) -> dict[str, Any]:
    """Parse a JSON object out of model output, or return a copy of ``fallback``."""
    payload = extract_json(text)
    if payload is None:
        logger.warning("No JSON object found in Gemini response")
        return dict(fallback)

    try:
        data = json.loads(payload)
    except json.JSONDecodeError as e:
        logger.error("Failed to parse Gemini response as JSON: %s", e)
        return dict(fallback)

    if not isinstance(data, dict):
        return dict(fallback)
    return data


async def generate_json(
    prompt: str,
    fallback: dict[str, Any],
    system_prompt: str | None = None,
    temperature: float | None = None,
) -> dict[str, Any]:
    """Generate with retry and parse the reply as a JSON object.

    Transport errors propagate; unparsable replies yield ``fallback``.
    """
    text = await with_retry(lambda: generate_text(prompt, system_prompt, temperature))
    return safe_parse(text, fallback)
