"""Tests for the packaged data files and their loaders."""

import pytest

from spirithub.config import DREAM_CATEGORIES, FEATURED_DREAM_SLUGS, MOON_PHASES
from spirithub.dreams import generate_slug
from spirithub.exceptions import DataValidationError
from spirithub.loaders import (
    build_search_index,
    dream_validation_report,
    load_dream_symbols,
    load_energy_data,
    load_interpretations,
    load_moon_guide_data,
    load_oracle_messages,
    read_dream_symbols_csv,
    read_json,
)

NUMBER_KEYS = {str(n) for n in range(1, 10)} | {"11", "22", "33"}


class TestDreamSymbols:
    """The packaged dream dictionary."""

    def test_slugs_match_names(self):
        df = load_dream_symbols()
        for name, slug in zip(df["name"], df["slug"]):
            assert generate_slug(name) == slug

    def test_report_is_clean(self):
        report = dream_validation_report(load_dream_symbols())
        assert report["duplicate_slugs"] == []
        assert report["unknown_categories"] == []
        assert report["incomplete_rows"] == []
        assert set(report["per_category"]) == {c["id"] for c in DREAM_CATEGORIES}

    def test_featured_present(self):
        slugs = set(load_dream_symbols()["slug"])
        assert set(FEATURED_DREAM_SLUGS) <= slugs

    def test_returns_copy(self):
        df = load_dream_symbols()
        df.loc[0, "name"] = "X"
        assert load_dream_symbols().loc[0, "name"] != "X"

    def test_missing_columns(self, tmp_path):
        path = tmp_path / "bad.csv"
        path.write_text("name;slug\nApă;apa\n", encoding="utf-8")
        with pytest.raises(DataValidationError, match="Coloane lipsă"):
            read_dream_symbols_csv(path)

    def test_strips_whitespace(self, tmp_path):
        path = tmp_path / "symbols.csv"
        path.write_text(
            "name;slug;category;short_meaning;full_interpretation\n"
            " Apă ; apa ;natura; Emoții. ;Text\n",
            encoding="utf-8",
        )
        row = read_dream_symbols_csv(path).iloc[0]
        assert row["name"] == "Apă"
        assert row["slug"] == "apa"
        assert row["short_meaning"] == "Emoții."

    def test_report_flags_problems(self, symbols_df):
        df = symbols_df.copy()
        df.loc[len(df)] = ["Șarpe", "sarpe", "monstri", "", ""]
        report = dream_validation_report(df)
        assert report["duplicate_slugs"] == ["sarpe"]
        assert report["unknown_categories"] == ["monstri"]
        assert report["incomplete_rows"] == ["sarpe"]

    def test_search_index_sorted(self, symbols_df):
        index = build_search_index(symbols_df)
        assert index[0] == {"name": "A zbura", "slug": "a-zbura", "category": "actiuni"}
        assert set(index[0]) == {"name", "slug", "category"}


class TestInterpretationFiles:
    @pytest.mark.parametrize("kind", ["life-path", "destiny", "daily"])
    def test_numbers_covered(self, kind):
        data = load_interpretations(kind)
        assert set(data) == NUMBER_KEYS
        for entry in data.values():
            assert entry["hero"]["title"]
            assert entry["content"]["main_text"]
            assert entry["mantra"]

    def test_compatibility_anchors(self):
        assert set(load_interpretations("compatibility")) == {"25", "50", "75", "100"}

    def test_unknown_type(self):
        with pytest.raises(KeyError):
            load_interpretations("tarot")

    def test_energy_week(self):
        data = load_energy_data()
        assert set(data) == {str(d) for d in range(7)}
        assert data["0"]["dayName"] == "Duminică"

    def test_moon_guide_phases(self):
        data = load_moon_guide_data()
        assert {p["key"] for p in MOON_PHASES} <= set(data)

    def test_oracle_messages(self):
        messages = load_oracle_messages()
        ids = [m["id"] for m in messages]
        assert len(ids) == len(set(ids)) == 12

    def test_read_json_errors(self, tmp_path):
        with pytest.raises(DataValidationError, match="Fișier lipsă"):
            read_json(tmp_path / "missing.json")
        bad = tmp_path / "bad.json"
        bad.write_text("{", encoding="utf-8")
        with pytest.raises(DataValidationError, match="JSON invalid"):
            read_json(bad)
