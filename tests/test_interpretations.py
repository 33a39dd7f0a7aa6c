"""Tests for interpretation lookups."""

import pytest

from spirithub.interpretations import (
    get_all_interpretations,
    get_compatibility_interpretation,
    get_interpretation,
    short_text,
)


class TestGetInterpretation:
    def test_life_path(self):
        assert get_interpretation("life-path", 1)["hero"]["title"] == "Lider Natural"
        assert get_interpretation("life-path", "33")["hero"]["title"] == "Învățător Maestru"

    def test_destiny(self):
        assert get_interpretation("destiny", 1)["hero"]["title"] == "Pionier și Inovator"

    def test_returns_copy(self):
        entry = get_interpretation("daily", 7)
        entry["hero"]["title"] = "modificat"
        assert get_interpretation("daily", 7)["hero"]["title"] == "Zi de Introspecție și Înțelepciune"

    def test_missing_number(self):
        assert get_interpretation("destiny", 10) is None
        assert get_interpretation("destiny", 10, use_fallback=True) is None

    def test_fallback(self):
        assert get_interpretation("life-path", 10, use_fallback=True)["hero"]["title"] == "Calea Ta"
        assert get_interpretation("daily", 10, use_fallback=True)["hero"]["title"] == "Energia Zilei"

    def test_unknown_type(self):
        assert get_interpretation("tarot", 1) is None
        assert get_all_interpretations("tarot") == {}


class TestCompatibility:
    @pytest.mark.parametrize("score,title", [
        (100, "Compatibilitate Excelentă"),
        (85, "Compatibilitate Excelentă"),
        (60, "Compatibilitate Bună"),
        (30, "Compatibilitate Medie"),
        (0, "Compatibilitate Scăzută"),
    ])
    def test_by_level(self, score, title):
        assert get_compatibility_interpretation(score)["hero"]["title"] == title


class TestShortText:
    def test_headline_preferred(self):
        assert short_text({"hero": {"title": "T", "subtitle": "S", "headline": "H"}}) == {
            "title": "T", "description": "H"}

    def test_subtitle_fallback(self):
        assert short_text({"hero": {"title": "T", "subtitle": "S"}}) == {"title": "T", "description": "S"}

    def test_empty_entry(self):
        assert short_text({}) == {"title": "", "description": ""}
