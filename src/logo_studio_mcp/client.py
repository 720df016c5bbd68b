"""Shared Gemini client pool with image-generation support."""

from __future__ import annotations

import logging
from typing import Any

from google import genai
from google.genai import types

from .config import get_config

logger = logging.getLogger(__name__)


class GeminiClient:
    """Process-wide Gemini client pool (one client per API key)."""

    _clients: dict[str, genai.Client] = {}

    @classmethod
    def get(cls, api_key: str | None = None) -> genai.Client:
        """Return (or create) the shared client for *api_key*."""
        key = api_key or get_config().gemini_api_key
        if not key:
            raise ValueError("No Gemini API key — set GEMINI_API_KEY or pass api_key explicitly")
        if key not in cls._clients:
            cls._clients[key] = genai.Client(api_key=key)
            logger.info("Created Gemini client (key …%s)", key[-4:])
        return cls._clients[key]

    @classmethod
    async def generate_image(
        cls,
        contents: Any,
        *,
        model: str | None = None,
        aspect_ratio: str | None = None,
        **kwargs: Any,
    ) -> types.GenerateContentResponse:
        """Issue one image-generation call and return the raw response.

        No retry is attempted; any SDK or transport exception propagates
        unchanged to the caller.

        Args:
            contents: Prompt contents (text or parts).
            model: Override model ID (defaults to config's image_model).
            aspect_ratio: Override aspect ratio (defaults to config's aspect_ratio).
            **kwargs: Forwarded to the underlying generate_content call.

        Returns:
            The unmodified ``GenerateContentResponse``.
        """
        cfg = get_config()
        resolved_model = model or cfg.image_model
        config = types.GenerateContentConfig(
            image_config=types.ImageConfig(aspect_ratio=aspect_ratio or cfg.aspect_ratio),
        )

        client = cls.get()
        return await client.aio.models.generate_content(
            model=resolved_model,
            contents=contents,
            config=config,
            **kwargs,
        )

    @classmethod
    async def close_all(cls) -> int:
        """Shut down all shared clients. Returns count closed."""
        count = 0
        for client in list(cls._clients.values()):
            try:
                await client.aio.aclose()
            except Exception:
                logger.debug("Async client close failed", exc_info=True)
            try:
                client.close()
            except Exception:
                logger.debug("Sync client close failed", exc_info=True)
            count += 1
        cls._clients.clear()
        logger.info("Closed %d Gemini client(s)", count)
        return count
