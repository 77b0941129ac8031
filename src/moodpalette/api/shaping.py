"""Normalisation of extracted model JSON into a :class:`PaletteResult`.

The model is asked for a fixed shape but nothing guarantees it complies.
:func:`shape_palette` insists only on what the response contract needs (a
``palette`` array) and repairs everything else:

- the palette is truncated to the requested count, never padded;
- ``hex`` is upper-cased, with missing or non-text values becoming ``""``;
- a missing or empty ``name`` becomes ``"Color N"`` (1-based position);
- a non-text ``description`` becomes ``""``;
- lone UTF-16 surrogates (valid in JSON escapes, not encodable as UTF-8)
  are replaced with U+FFFD.

Hex codes are not checked against ``#RRGGBB``; malformed codes pass through.

Like :mod:`moodpalette.api.extraction`, shaping never raises: a reply
without a palette array yields :data:`INVALID_UPSTREAM_SHAPE`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from moodpalette.api.models import ColorEntry, PaletteResult


@dataclass(frozen=True)
class ShapeOutcome:
    """Result of shaping parsed model output.

    Attributes:
        ok: ``False`` when the output has no usable ``palette`` array.
        result: The shaped palette.  ``None`` when ``ok`` is ``False``.
    """

    ok: bool
    result: PaletteResult | None = None


INVALID_UPSTREAM_SHAPE = ShapeOutcome(ok=False)


def _clean_text(value: str) -> str:
    return value.encode("utf-8", "surrogatepass").decode("utf-8", "replace")


def _shape_entry(entry: Any, position: int) -> ColorEntry:
    if not isinstance(entry, dict):
        entry = {}

    hex_value = entry.get("hex")
    name = entry.get("name")

    return ColorEntry(
        hex=_clean_text(hex_value if isinstance(hex_value, str) else "").upper(),
        name=_clean_text(name) if isinstance(name, str) and name else f"Color {position}",
    )


def shape_palette(parsed: Any, count: int) -> ShapeOutcome:
    """Build the response body from parsed model output.

    Args:
        parsed: JSON value returned by :func:`~moodpalette.api.extraction.extract_json`.
        count: Maximum number of colours to keep.

    Returns:
        An ok :class:`ShapeOutcome` carrying the :class:`PaletteResult`, or
        :data:`INVALID_UPSTREAM_SHAPE` if *parsed* is not an object or its
        ``palette`` field is missing or not an array.
    """
    if not isinstance(parsed, dict) or not isinstance(parsed.get("palette"), list):
        return INVALID_UPSTREAM_SHAPE

    palette = [
        _shape_entry(entry, position)
        for position, entry in enumerate(parsed["palette"][:count], start=1)
    ]

    description = parsed.get("description")
    return ShapeOutcome(
        ok=True,
        result=PaletteResult(
            palette=palette,
            description=_clean_text(description) if isinstance(description, str) else "",
        ),
    )
