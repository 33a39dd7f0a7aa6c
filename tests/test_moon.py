"""Tests for moon phases and the moon guide."""

from datetime import date, datetime, timedelta

import pytest
import pytz

from spirithub.moon import (
    KNOWN_NEW_MOON,
    get_moon_guide,
    get_moon_phase,
    moon_cache_key,
)


class TestMoonPhase:
    def test_reference_new_moon(self):
        phase = get_moon_phase(KNOWN_NEW_MOON)
        assert phase["phase_key"] == "new"
        assert phase["fraction"] == 0
        assert phase["age_days"] == 0

    def test_full_moon(self):
        phase = get_moon_phase(datetime(2000, 1, 21, 12, 0, tzinfo=pytz.utc))
        assert phase["phase_key"] == "full"
        assert phase["emoji"] == "🌕"

    def test_quarters(self):
        assert get_moon_phase(KNOWN_NEW_MOON + timedelta(days=7.4))["phase_key"] == "first_quarter"
        assert get_moon_phase(KNOWN_NEW_MOON + timedelta(days=22.1))["phase_key"] == "last_quarter"

    def test_naive_datetime_is_utc(self):
        naive = get_moon_phase(datetime(2025, 11, 14, 10, 0))
        aware = get_moon_phase(datetime(2025, 11, 14, 10, 0, tzinfo=pytz.utc))
        assert naive == aware

    def test_date_is_midnight_utc(self):
        # 6 ianuarie 2000 la miezul nopții e încă înainte de luna nouă de referință
        phase = get_moon_phase(date(2000, 1, 6))
        assert phase["phase_key"] == "new"
        assert phase["fraction"] == pytest.approx(0.974, abs=0.001)

    def test_dates_before_reference(self):
        phase = get_moon_phase(KNOWN_NEW_MOON - timedelta(days=1))
        assert 0 <= phase["fraction"] < 1
        assert phase["phase_key"] == "new"

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            get_moon_phase("2025-11-14")


class TestMoonGuide:
    def test_merges_interpretation(self):
        guide = get_moon_guide(KNOWN_NEW_MOON, {"new": {"title": "Început", "mantra": "M"}})
        assert guide["phase_key"] == "new"
        assert guide["title"] == "Început"

    def test_missing_phase_falls_back_to_new(self):
        guide = get_moon_guide(datetime(2000, 1, 21, 12, 0), {"new": {"title": "Început"}})
        assert guide["phase_key"] == "full"
        assert guide["title"] == "Început"

    def test_packaged_guide(self):
        guide = get_moon_guide(datetime(2000, 1, 21, 12, 0))
        for field in ("title", "insight", "guidance", "mantra"):
            assert guide[field]


class TestBucharestWindow:
    def test_cache_key_winter(self):
        assert moon_cache_key(datetime(2025, 11, 14, 10, 0)) == "2025-11-14-12"

    def test_cache_key_crosses_midnight(self):
        assert moon_cache_key(datetime(2025, 11, 14, 22, 30)) == "2025-11-15-0"

    def test_cache_key_summer_time(self):
        assert moon_cache_key(datetime(2025, 7, 1, 3, 0)) == "2025-07-01-6"
