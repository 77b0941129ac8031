"""Pydantic request and response models for the Mood Palette API.

These models define the JSON schema for every API endpoint.  FastAPI uses
them for automatic request validation, serialisation, and OpenAPI
documentation generation.

Models
------
PaletteRequest
    Payload for ``POST /api/generate-palette`` — the mood seed and the
    number of colours wanted.
ColorEntry
    A single named colour in a generated palette.
PaletteResult
    Successful response body: the palette and its description.
ErrorResponse
    Body of every non-200 response.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from moodpalette.api.prompt_builder import DEFAULT_COLOR_COUNT

MIN_COLOR_COUNT = 1
MAX_COLOR_COUNT = 10


class PaletteRequest(BaseModel):
    """Request body for the ``POST /api/generate-palette`` endpoint.

    Attributes:
        seed: Mood or theme phrase.  Must be a non-empty JSON string; numbers
            and other types are rejected rather than coerced.
        count: Number of colours to generate.  Anything that is not an
            integer in ``[1, 10]`` falls back to 5 instead of failing
            validation.
    """

    seed: str = Field(
        ...,
        strict=True,
        min_length=1,
        description="Mood or theme phrase (e.g. 'sunset over the harbour').",
    )
    count: int = Field(
        default=DEFAULT_COLOR_COUNT,
        description="Number of colours (1–10, anything else means 5).",
    )

    @field_validator("count", mode="before")
    @classmethod
    def _clamp_count(cls, value: object) -> int:
        # JSON has a single number type, so 3.0 is the integer 3.
        if isinstance(value, float) and value.is_integer():
            value = int(value)
        if (
            isinstance(value, int)
            and not isinstance(value, bool)
            and MIN_COLOR_COUNT <= value <= MAX_COLOR_COUNT
        ):
            return value
        return DEFAULT_COLOR_COUNT


class ColorEntry(BaseModel):
    """One colour of a palette.

    Attributes:
        hex: Upper-cased hex code as returned by the model.  The format is
            not validated; clients must tolerate malformed values.
        name: Short human-readable colour name, never empty.
    """

    hex: str = Field(..., description="Upper-cased hex code, e.g. '#FF8800'.")
    name: str = Field(..., description="Short colour name.")


class PaletteResult(BaseModel):
    """Response body for a successful palette generation.

    Attributes:
        palette: Colours in model order, at most the requested count.
        description: Model-provided description of the palette, possibly
            empty.
    """

    palette: list[ColorEntry] = Field(default_factory=list)
    description: str = Field(default="")


class ErrorResponse(BaseModel):
    """Body of an error response.  ``raw`` is present only on 502."""

    error: str
    raw: str | None = None
