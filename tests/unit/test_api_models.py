"""Tests for moodpalette.api.models — Pydantic request/response models.

Tests cover:
- Seed validation (required, strict text, non-empty).
- Count clamping to the default instead of rejection.
- Response model serialisation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from moodpalette.api.models import ColorEntry, ErrorResponse, PaletteRequest, PaletteResult


class TestPaletteRequestSeed:
    """Test seed validation on PaletteRequest."""

    def test_valid_request(self):
        req = PaletteRequest(seed="sunset", count=3)
        assert req.seed == "sunset"
        assert req.count == 3

    def test_missing_seed_raises(self):
        with pytest.raises(ValidationError):
            PaletteRequest.model_validate({"count": 3})

    def test_empty_seed_raises(self):
        with pytest.raises(ValidationError):
            PaletteRequest.model_validate({"seed": ""})

    @pytest.mark.parametrize("seed", [42, None, ["sunset"], {"mood": "calm"}, True])
    def test_non_text_seed_raises(self, seed):
        """Seeds are never coerced from other JSON types."""
        with pytest.raises(ValidationError):
            PaletteRequest.model_validate({"seed": seed})

    def test_whitespace_seed_accepted(self):
        assert PaletteRequest.model_validate({"seed": "   "}).seed == "   "


class TestPaletteRequestCount:
    """Test count clamping on PaletteRequest."""

    def test_default_count(self):
        assert PaletteRequest.model_validate({"seed": "calm"}).count == 5

    @pytest.mark.parametrize("count", [1, 4, 10])
    def test_in_range_kept(self, count):
        assert PaletteRequest.model_validate({"seed": "calm", "count": count}).count == count

    @pytest.mark.parametrize("count", [0, 11, -3, 2.5, "3", None, True, [3]])
    def test_invalid_falls_back_to_default(self, count):
        assert PaletteRequest.model_validate({"seed": "calm", "count": count}).count == 5

    def test_integral_float_accepted(self):
        assert PaletteRequest.model_validate({"seed": "calm", "count": 3.0}).count == 3

    def test_from_json_payload(self):
        req = PaletteRequest.model_validate_json('{"seed": "calm", "count": 2.5}')
        assert req.count == 5


class TestResponseModels:
    def test_palette_result_dump(self):
        result = PaletteResult(
            palette=[ColorEntry(hex="#FF0000", name="Red")],
            description="Bold.",
        )
        assert result.model_dump() == {
            "palette": [{"hex": "#FF0000", "name": "Red"}],
            "description": "Bold.",
        }

    def test_palette_result_defaults(self):
        assert PaletteResult().model_dump() == {"palette": [], "description": ""}

    def test_error_response_without_raw(self):
        assert ErrorResponse(error="boom").model_dump(exclude_none=True) == {"error": "boom"}
