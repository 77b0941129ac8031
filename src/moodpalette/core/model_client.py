"""Generative text backend for the Mood Palette service.

This module provides :class:`GeminiModelClient`, the single point of contact
with the Google Gemini API, and :class:`PaletteModelClient`, the structural
interface the API layer depends on.

The API layer never constructs a client itself.  A client is built once by
:func:`moodpalette.api.main.main` (or by a test) and injected into
:func:`moodpalette.api.main.create_app`, which makes it trivial to substitute
a fake backend.

Usage
-----
::

    from moodpalette.core.config import MoodPaletteConfig
    from moodpalette.core.model_client import GeminiModelClient

    client = GeminiModelClient.from_config(MoodPaletteConfig())
    text = await client.generate_text("Return a palette for 'sunset'.")

See Also
--------
- :mod:`moodpalette.core.config` — model name, credential and timeout.
- :mod:`moodpalette.api.main` — the FastAPI application that awaits the client.
"""

from __future__ import annotations

import logging
from typing import Protocol, runtime_checkable

from google import genai
from google.genai import types

from moodpalette.core.config import MoodPaletteConfig

logger = logging.getLogger(__name__)


@runtime_checkable
class PaletteModelClient(Protocol):
    """Anything that turns a prompt into raw model text."""

    model_name: str

    async def generate_text(self, prompt: str) -> str:
        """Send *prompt* to the model and return its raw text reply."""
        ...


class GeminiModelClient:
    """Async wrapper around the ``google-genai`` SDK.

    Attributes:
        model_name (str):
            Gemini model identifier passed to every ``generate_content`` call.
        _client (genai.Client):
            Underlying SDK client.  Holds the API key and HTTP options.
    """

    def __init__(
        self,
        api_key: str,
        model_name: str,
        *,
        timeout_ms: int | None = None,
    ) -> None:
        """Create the SDK client.

        Args:
            api_key: Google Gemini API key.
            model_name: Model identifier (e.g. ``"gemini-1.5-flash"``).
            timeout_ms: Per-request HTTP timeout in milliseconds.  ``None``
                applies no timeout.
        """
        self.model_name = model_name
        self._client = genai.Client(
            api_key=api_key,
            http_options=types.HttpOptions(timeout=timeout_ms),
        )

    @classmethod
    def from_config(cls, config: MoodPaletteConfig) -> GeminiModelClient:
        """Build a client from application settings."""
        return cls(
            api_key=config.gemini_api_key.get_secret_value(),
            model_name=config.model_name,
            timeout_ms=config.request_timeout_ms,
        )

    async def generate_text(self, prompt: str) -> str:
        """Run a single text generation and return the reply text.

        Errors raised by the SDK (network failures, quota errors, blocked
        prompts) propagate unchanged to the caller.

        Args:
            prompt: Fully compiled instruction prompt.

        Returns:
            The model's text output, or an empty string when the response
            carries no text parts.
        """
        logger.debug("Requesting completion from %s (%d chars)", self.model_name, len(prompt))
        response = await self._client.aio.models.generate_content(
            model=self.model_name,
            contents=prompt,
        )
        return response.text or ""
