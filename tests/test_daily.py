"""Tests for the content of the day and the home page widgets."""

from datetime import date, datetime

import pytest
import requests

from spirithub import daily
from spirithub.daily import (
    calculate_daily_number,
    daily_dream_index,
    djb2_hash,
    get_daily_content,
    get_daily_dream,
    get_daily_number,
    get_daily_oracle,
    get_daily_widget_data,
    get_energia_zilei,
    resolve_daily_dream,
    resolve_daily_number,
)
from spirithub.dreams import DreamDictionary
from spirithub.exceptions import ValidationError
from spirithub.interpretations import get_interpretation, short_text
from spirithub.services import convex_client
from spirithub.store import ContentStore

from .conftest import FakeResponse, FakeSession


class TestDailyNumber:
    def test_known_date(self):
        assert calculate_daily_number("2025-11-14") == 7

    def test_master_number_kept(self):
        assert calculate_daily_number("2025-01-01") == 11

    def test_invalid_format(self):
        with pytest.raises(ValidationError):
            calculate_daily_number("14.11.2025")

    def test_impossible_date(self):
        with pytest.raises(ValidationError):
            calculate_daily_number("2025-02-30")

    def test_with_interpretation(self):
        info = get_daily_number("2025-11-14")
        assert info["number"] == 7
        assert info["date"] == "2025-11-14"
        assert info["title"] == "Zi de Introspecție și Înțelepciune"
        assert info["description"].startswith("Astăzi este ziua perfectă pentru meditație")
        assert info["interpretation"]["content"]["main_text"]


class TestDailyDream:
    def test_djb2_values(self):
        assert djb2_hash("") == 5381
        assert djb2_hash("a") == 177670
        assert djb2_hash("ab") == 5863208

    def test_djb2_wraps_like_32_bit_shift(self):
        assert djb2_hash("2025-11-14") == 1481115983
        # suma depășește 2**31 în timp ce deplasarea se trunchiază
        assert djb2_hash("2030-06-15") == 3281474512

    def test_index_for_real_dates(self):
        assert daily_dream_index("2025-11-14", 36) == 23
        assert daily_dream_index("1999-12-31", 36) == 26

    def test_djb2_is_stable(self):
        assert djb2_hash("2025-11-14") == djb2_hash("2025-11-14")

    def test_index(self):
        assert daily_dream_index("a", 10) == 0
        assert daily_dream_index("ab", 7) == 1

    def test_index_requires_positive_total(self):
        with pytest.raises(ValidationError, match="total must be a positive number"):
            daily_dream_index("2025-11-14", 0)

    def test_pick_ignores_input_order(self, symbols_df):
        symbols = symbols_df.to_dict("records")
        first = get_daily_dream("2025-11-14", symbols)
        second = get_daily_dream("2025-11-14", list(reversed(symbols)))
        assert first == second
        ordered = sorted(symbols, key=lambda s: s["slug"])
        assert first == ordered[daily_dream_index("2025-11-14", len(symbols))]

    def test_empty_list(self):
        assert get_daily_dream("2025-11-14", []) is None


class TestOracleAndEnergy:
    def test_oracle_formula(self):
        # ziua 1 din an: (1 * 31 + 2025) % 12 = 4
        assert get_daily_oracle(date(2025, 1, 1))["id"] == 5

    def test_oracle_custom_messages(self):
        msgs = [{"id": "a"}, {"id": "b"}, {"id": "c"}]
        assert get_daily_oracle("2025-01-01", msgs)["id"] == "b"

    def test_oracle_empty_list(self):
        with pytest.raises(ValidationError):
            get_daily_oracle(date(2025, 1, 1), [])

    def test_energy_by_weekday(self):
        assert get_energia_zilei(date(2025, 11, 14))["dayName"] == "Vineri"
        assert get_energia_zilei(date(2025, 11, 16))["planet"] == "Soarele"

    def test_energy_missing_day_falls_back_to_sunday(self):
        assert get_energia_zilei(date(2025, 11, 14), {"0": {"dayName": "Duminică"}}) == {"dayName": "Duminică"}

    def test_daily_content(self, symbols_df):
        content = get_daily_content("2025-11-14", DreamDictionary(symbols_df))
        assert content["date"] == "2025-11-14"
        assert content["daily_number"]["number"] == 7
        assert content["daily_dream"]["slug"] in set(symbols_df["slug"])
        assert content["energia_zilei"]["dayName"] == "Vineri"
        assert content["moon_phase"]["phase_key"]
        assert content["oracle"]["mantra"]


class TestWidgetData:
    NOW = datetime(2025, 11, 14, 10, 0)

    def test_local_widgets(self, symbols_df):
        data = get_daily_widget_data(self.NOW, DreamDictionary(symbols_df), use_remote=False)
        assert data["dailyNumber"]["number"] == 7
        assert data["dailyNumber"]["date"] == "2025-11-14"
        assert data["dailyDream"]["name"] in set(symbols_df["name"])
        assert data["biorhythmHint"]["dayOfWeek"] == "Vineri"

    def test_remote_widgets(self):
        session = FakeSession({
            "numerology:getDailyNumber": FakeResponse({"status": "success", "value": {
                "number": 7, "title": "Zi de Introspecție", "description": "D", "date": "2025-11-14"}}),
            "dreams:getDailyDream": FakeResponse({"status": "success", "value": {
                "name": "Șarpe", "category": "animale", "shortDescription": "S"}}),
        })
        convex_client.configure(url="https://demo.convex.cloud", session=session)
        data = get_daily_widget_data(self.NOW)
        assert data["dailyNumber"] == {"number": 7, "title": "Zi de Introspecție", "description": "D",
                                       "date": "2025-11-14"}
        assert data["dailyDream"] == {"name": "Șarpe", "category": "animale", "shortDescription": "S"}
        assert [c["json"]["args"] for c in session.calls] == [{"date": "2025-11-14"}] * 2

    def test_remote_failure_yields_none(self, caplog):
        session = FakeSession(default=requests.ConnectionError("offline"))
        convex_client.configure(url="https://demo.convex.cloud", session=session)
        data = get_daily_widget_data(self.NOW)
        assert data["dailyNumber"] is None
        assert data["dailyDream"] is None
        assert data["biorhythmHint"]["title"] == "Armonie & Frumusețe"
        assert "[DailyWidget]" in caplog.text

    def test_cached_per_date(self, symbols_df):
        first = get_daily_widget_data(self.NOW, DreamDictionary(symbols_df), use_remote=False)
        convex_client.configure(url="https://demo.convex.cloud",
                                session=FakeSession(default=requests.ConnectionError("offline")))
        assert get_daily_widget_data(self.NOW) is first
        daily.clear_widget_cache()
        assert get_daily_widget_data(self.NOW)["dailyNumber"] is None


def _save_pick(store, pick_type, content_id, date_str="2025-11-14"):
    with store.get_connection() as conn:
        conn.execute(
            "INSERT INTO daily_picks (date, type, content_id, created_at) VALUES (?, ?, ?, ?)",
            (date_str, pick_type, content_id, 0),
        )


class TestSavedPicks:
    NOW = datetime(2025, 11, 14, 10, 0)

    @pytest.fixture
    def seeded(self, store, symbols_df):
        store.seed_interpretations()
        store.seed_dream_symbols(symbols_df.to_dict("records"))
        return store

    def test_widget_returns_saved_dream(self, seeded, symbols_df):
        _save_pick(seeded, "daily-dream", "mama")
        data = get_daily_widget_data(self.NOW, DreamDictionary(symbols_df), use_remote=False, store=seeded)
        assert data["dailyDream"] == {"name": "Mamă", "category": "persoane",
                                      "shortDescription": "Grijă și protecție."}

    def test_widget_returns_saved_number(self, seeded, symbols_df):
        _save_pick(seeded, "daily-number", "3")
        data = get_daily_widget_data(self.NOW, DreamDictionary(symbols_df), use_remote=False, store=seeded)
        assert data["dailyNumber"]["number"] == 3
        assert data["dailyNumber"]["title"] == short_text(get_interpretation("daily", 3))["title"]

    def test_default_database_is_read(self, symbols_df):
        store = ContentStore()
        store.seed_dream_symbols(symbols_df.to_dict("records"))
        _save_pick(store, "daily-dream", "biserica")
        data = get_daily_widget_data(self.NOW, DreamDictionary(symbols_df), use_remote=False)
        assert data["dailyDream"]["name"] == "Biserică"
        assert resolve_daily_dream("2025-11-14", DreamDictionary(symbols_df))["slug"] == "biserica"

    def test_empty_database_falls_back_to_calculation(self, store, symbols_df):
        expected = get_daily_dream("2025-11-14", symbols_df.to_dict("records"))
        assert resolve_daily_dream("2025-11-14", DreamDictionary(symbols_df), store) == expected
        assert resolve_daily_number("2025-11-14", store) == {
            "number": 7, "title": "Zi de Introspecție și Înțelepciune",
            "description": get_daily_number("2025-11-14")["description"], "date": "2025-11-14"}

    def test_without_database_file(self, symbols_df):
        assert resolve_daily_number("2025-11-14")["number"] == 7
        assert resolve_daily_dream("2025-11-14", DreamDictionary(symbols_df))["slug"] in set(symbols_df["slug"])
