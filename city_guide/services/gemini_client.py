# city_guide/services/gemini_client.py

import json
from typing import Optional

import httpx

from city_guide.core.config import Settings
from city_guide.core.errors import LanguageModelError
from city_guide.core.logging_config import logger

PROBE_PROMPT = (
    "Hello, this is a test message. Please respond with 'OK' if you can read this."
)


async def generate_text(
    prompt: str,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
    timeout: Optional[float] = None,
) -> Optional[str]:
    """
    Send a single-turn prompt to Gemini and return the first candidate's text.

    Returns None when the call succeeded but carried no text.
    Raises LanguageModelError on any transport or HTTP failure.
    """
    payload = {"contents": [{"parts": [{"text": prompt}]}]}

    try:
        async with httpx.AsyncClient(
            timeout=timeout or settings.GEMINI_TIMEOUT, transport=transport
        ) as client:
            response = await client.post(
                settings.gemini_generate_url,
                params={"key": settings.GEMINI_API_KEY},
                json=payload,
                headers={"Content-Type": "application/json"},
            )
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        logger.error(
            f"Gemini returned {exc.response.status_code}: {exc.response.text}"
        )
        raise LanguageModelError(
            f"Request failed with status code {exc.response.status_code}"
        ) from exc
    except httpx.HTTPError as exc:
        logger.error(f"Gemini request failed: {exc!r}")
        raise LanguageModelError(str(exc) or exc.__class__.__name__) from exc

    try:
        data = response.json()
    except ValueError as exc:
        raise LanguageModelError("Gemini returned a non-JSON body") from exc

    logger.debug(f"Raw Gemini response: {json.dumps(data, indent=2)}")

    try:
        text = data["candidates"][0]["content"]["parts"][0]["text"]
    except (KeyError, IndexError, TypeError):
        logger.warning("Gemini response carried no candidate text")
        return None

    return text if isinstance(text, str) and text else None


async def probe(
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> str:
    """Live connectivity check for the diagnostics endpoint."""
    if not settings.GEMINI_API_KEY:
        return "Not tested"

    try:
        await generate_text(
            PROBE_PROMPT,
            settings,
            transport=transport,
            timeout=settings.GEMINI_PROBE_TIMEOUT,
        )
    except LanguageModelError as exc:
        return f"Error: {exc.message}"

    return "Working"
