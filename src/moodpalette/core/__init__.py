"""Core infrastructure for the Mood Palette service.

- **MoodPaletteConfig**: configuration management using Pydantic Settings
- **PaletteModelClient**: interface for the generative text backend
- **GeminiModelClient**: Google Gemini implementation of that interface
"""

from moodpalette.core.config import MoodPaletteConfig
from moodpalette.core.model_client import GeminiModelClient, PaletteModelClient

__all__ = [
    "GeminiModelClient",
    "MoodPaletteConfig",
    "PaletteModelClient",
]
