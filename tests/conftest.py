"""Shared pytest fixtures for Mood Palette tests."""

from __future__ import annotations

import json
import os
from typing import Generator

import pytest
from fastapi.testclient import TestClient

from moodpalette.api.main import create_app
from moodpalette.core.config import MoodPaletteConfig

# Environment variables that MoodPaletteConfig reads without the prefix.
_UNPREFIXED_ENV = ("GEMINI_API_KEY", "PORT")


class FakeModelClient:
    """Stand-in for GeminiModelClient that returns a canned reply.

    Attributes:
        reply: Text returned by every call.
        error: Exception raised by every call instead of replying.
        prompts: Every prompt received, in call order.
    """

    def __init__(self, reply: str = "", error: Exception | None = None) -> None:
        self.model_name = "fake-gemini"
        self.reply = reply
        self.error = error
        self.prompts: list[str] = []

    async def generate_text(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.reply


def make_reply(count: int, description: str = "Warm dusk tones.") -> str:
    """Build a well-formed model reply with *count* palette entries."""
    palette = [{"hex": f"#a{i}b{i}c{i}", "name": f"Tone {i}"} for i in range(count)]
    return json.dumps({"palette": palette, "description": description})


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch) -> pytest.MonkeyPatch:
    """Remove every variable MoodPaletteConfig would pick up.

    Returns:
        The monkeypatch instance, for tests that set variables afterwards.
    """
    for name in list(os.environ):
        if name.upper().startswith("MOODPALETTE_") or name.upper() in _UNPREFIXED_ENV:
            monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def test_config(clean_env: pytest.MonkeyPatch) -> MoodPaletteConfig:
    """Create a configuration that ignores the host environment.

    Returns:
        MoodPaletteConfig with a dummy API key
    """
    return MoodPaletteConfig(gemini_api_key="test-key", _env_file=None)


@pytest.fixture
def fake_model_client() -> FakeModelClient:
    """Model client that replies with a valid three-colour palette."""
    return FakeModelClient(reply=make_reply(3))


@pytest.fixture
def test_client(
    test_config: MoodPaletteConfig, fake_model_client: FakeModelClient
) -> Generator[TestClient, None, None]:
    """TestClient for an app wired to the fake model client.

    Yields:
        TestClient with the application lifespan running
    """
    app = create_app(test_config, fake_model_client)
    with TestClient(app) as client:
        yield client
