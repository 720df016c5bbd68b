"""Logo generation: one brief in, one PNG data URI out.

``generate_logo`` is the only code path that talks to the image model:

1. reject a blank brief before any network activity,
2. expand the brief into the fixed logo prompt,
3. make exactly one ``generate_content`` call with a square aspect ratio,
4. pick the image out of the response with ``extract_image_data``.

Image parts are not guaranteed to come first. Gemini image models often
lead with a text part ("Here is your logo...") and put the inline image
after it, at no fixed index, so the response is searched rather than indexed.
"""

from __future__ import annotations

import base64
import logging
from collections.abc import Iterable
from typing import Any

from google.genai import types

from .client import GeminiClient
from .errors import EmptyBriefError, NoImageDataError, TransportError
from .models.logo import GenerationRequest, GenerationResult
from .prompts.logo import resolve_prompt

logger = logging.getLogger(__name__)


def _response_parts(response: Any) -> list[Any]:
    """Return the content parts of the first candidate, or an empty list."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    return list(getattr(content, "parts", None) or [])


def find_image_part(parts: Iterable[Any]) -> Any | None:
    """Return the first part carrying inline image data, scanning in order.

    Parts without ``inline_data`` (text, thoughts) and parts whose inline
    data is empty are skipped. Returns None when no part qualifies.
    """
    for part in parts:
        inline = getattr(part, "inline_data", None)
        if inline is not None and getattr(inline, "data", None):
            return part
    return None


def extract_image_data(response: Any) -> str:
    """Return the base64 image payload from a Gemini response.

    The SDK decodes inline data to ``bytes``; it is re-encoded here so the
    payload can be embedded in a data URI. A ``str`` payload is assumed to be
    base64 already.

    Raises:
        NoImageDataError: If no content part carries inline image data.
    """
    part = find_image_part(_response_parts(response))
    if part is None:
        raise NoImageDataError()
    data = part.inline_data.data
    if isinstance(data, (bytes, bytearray)):
        return base64.b64encode(data).decode("ascii")
    return data


async def generate_logo(brief: str) -> GenerationResult:
    """Generate one logo image for *brief*.

    Args:
        brief: Free-text description of the company or brand.

    Returns:
        GenerationResult with the PNG data URI, the raw base64 payload and
        the resolved prompt.

    Raises:
        EmptyBriefError: If *brief* is empty or whitespace-only.
        NoImageDataError: If the model returned no image part.
        TransportError: If the API call failed for any other reason.
    """
    if not brief or not brief.strip():
        raise EmptyBriefError()

    request = GenerationRequest(brief=brief)
    prompt = resolve_prompt(request.brief)
    logger.info("Generating logo (%d-char brief)", len(request.brief))
    try:
        response = await GeminiClient.generate_image([types.Part(text=prompt)])
    except Exception as exc:
        logger.warning("Logo generation request failed: %s", exc)
        raise TransportError(f"image generation request failed: {exc}", cause=exc) from exc

    try:
        data = extract_image_data(response)
    except NoImageDataError:
        logger.warning("Logo generation returned no image data")
        raise

    logger.info("Logo generated (%d base64 chars)", len(data))
    return GenerationResult.from_base64(data, prompt)
