"""Recovery of a JSON value from raw model text.

Text models often wrap the requested JSON in prose or Markdown code fences.
:func:`extract_json` runs a two-step pipeline:

1. Parse the whole text as JSON.
2. Failing that, parse the span from the first ``{`` to the last ``}``.

Every step yields a :class:`ParseOutcome` instead of raising, so a failed
extraction is an ordinary value that the caller can branch on.  This also
keeps a successfully parsed JSON ``null`` distinct from "nothing found".
Text is parsed as strict JSON: ``NaN`` and ``Infinity`` are rejected, and
nesting too deep for the parser counts as unparseable.

Known limitation: stray braces in the surrounding prose (before the real
object or after it) widen the span and make the second step fail.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ParseOutcome:
    """Result of a JSON parse attempt.

    Attributes:
        ok: ``True`` when parsing succeeded.
        value: The parsed JSON value.  Always ``None`` when ``ok`` is ``False``.
    """

    ok: bool
    value: Any = None


NOTHING = ParseOutcome(ok=False)


def _reject_constant(name: str) -> Any:
    # NaN and Infinity are Python extensions, not JSON.
    raise ValueError(f"non-standard JSON constant: {name}")


def _try_parse(text: str) -> ParseOutcome:
    try:
        return ParseOutcome(ok=True, value=json.loads(text, parse_constant=_reject_constant))
    except (ValueError, RecursionError):
        return NOTHING


def _braced_span(text: str) -> str | None:
    """Return ``text`` from the first ``{`` through the last ``}``, if both exist."""
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1:
        return None
    return text[start : end + 1]


def extract_json(raw: str) -> ParseOutcome:
    """Extract a JSON value from raw model output.

    Args:
        raw: Text returned by the model.

    Returns:
        An ok :class:`ParseOutcome` carrying the parsed value, or
        :data:`NOTHING` when neither the whole text nor its braced span is
        valid JSON.
    """
    outcome = _try_parse(raw)
    if outcome.ok:
        return outcome

    span = _braced_span(raw)
    if span is None:
        return NOTHING

    return _try_parse(span)
