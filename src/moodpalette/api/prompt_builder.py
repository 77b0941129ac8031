"""Instruction prompt compilation for palette generation.

The prompt asks the text model for a palette in a fixed JSON shape so that
:mod:`moodpalette.api.extraction` can recover it from the reply.

Template Structure::

    You are a color palette generator.

    Input mood: "[seed]"

    Output format (STRICT JSON only, nothing else):
    {
      "palette": [
        {"hex":"#RRGGBB","name":"short name"},
        ...
      ],
      "description":"1-2 sentence description"
    }

    Return exactly [count] colors in the "palette" array.
    All hex codes must be valid 6-digit hex (uppercase).

The seed is embedded verbatim.  It is not escaped or validated here; input
validation belongs to :class:`~moodpalette.api.models.PaletteRequest`.

Usage
-----
::

    prompt = build_prompt("rainy afternoon in Lisbon", 4)
"""

from __future__ import annotations

DEFAULT_COLOR_COUNT = 5

# Braces in the JSON example are doubled so that ``str.format`` leaves them
# as literal characters.
_PROMPT_TEMPLATE = """
You are a color palette generator.

Input mood: "{seed}"

Output format (STRICT JSON only, nothing else):
{{
  "palette": [
    {{"hex":"#RRGGBB","name":"short name"}},
    ...
  ],
  "description":"1-2 sentence description"
}}

Return exactly {count} colors in the "palette" array.
All hex codes must be valid 6-digit hex (uppercase).
"""


def build_prompt(seed: str, count: int = DEFAULT_COLOR_COUNT) -> str:
    """Compile the generation prompt for a mood seed.

    Args:
        seed: Free-text mood or theme phrase, inserted verbatim.
        count: Exact number of colours to request.

    Returns:
        The instruction prompt.  The same arguments always produce the same
        string.
    """
    return _PROMPT_TEMPLATE.format(seed=seed, count=count)
