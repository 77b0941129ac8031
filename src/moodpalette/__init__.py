"""Mood Palette - AI colour palette generation from a mood phrase."""

__version__ = "0.1.0"

__all__ = ["__version__"]
