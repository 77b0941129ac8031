"""API error taxonomy for the Mood Palette service.

Each error carries the HTTP status it maps to and knows how to render its
JSON body.  Handlers registered by :func:`moodpalette.api.main.create_app`
turn raised errors into responses.

========================  ======  ==========================================
Class                     Status  Body
========================  ======  ==========================================
``InvalidInputError``     400     ``{"error": "Missing or invalid 'seed'."}``
``UpstreamParseError``    502     ``{"error": "Invalid AI response",``
                                  ``"raw": "<model text>"}``
``UnexpectedFaultError``  500     ``{"error": "Server error generating``
                                  ``palette"}``
========================  ======  ==========================================

The core functions never raise these: extraction and shaping return
failure values, and the route turns those into :class:`UpstreamParseError`.
"""

from __future__ import annotations


class PaletteAPIError(Exception):
    """Base class for errors that map onto an HTTP response."""

    status_code = 500
    default_message = "Server error generating palette"

    def __init__(self, message: str | None = None, raw: str | None = None) -> None:
        self.message = message or self.default_message
        self.raw = raw
        super().__init__(self.message)

    def to_dict(self) -> dict:
        rv = {"error": self.message}
        if self.raw is not None:
            rv["raw"] = self.raw
        return rv


class InvalidInputError(PaletteAPIError):
    status_code = 400
    default_message = "Missing or invalid 'seed'."


class UpstreamParseError(PaletteAPIError):
    """The model reply holds no usable palette object."""

    status_code = 502
    default_message = "Invalid AI response"

    def __init__(self, raw: str) -> None:
        super().__init__(raw=raw)


class UnexpectedFaultError(PaletteAPIError):
    status_code = 500
    default_message = "Server error generating palette"
