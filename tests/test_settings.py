"""Tests for runtime settings."""

from pathlib import Path

from spirithub import settings


class TestSettings:
    def test_defaults(self):
        current = settings.get_settings()
        assert current["convex_url"] is None
        assert current["convex_timeout"] == 10
        assert current["timezone"] == "Europe/Bucharest"

    def test_environment(self, monkeypatch):
        monkeypatch.setenv("SPIRITHUB_TZ", "UTC")
        monkeypatch.setenv("CONVEX_TIMEOUT", "nu")
        settings.reset()
        current = settings.get_settings()
        assert current["timezone"] == "UTC"
        assert current["convex_timeout"] == 10

    def test_configure_and_reset(self, tmp_path):
        settings.configure(db_path=str(tmp_path / "x.db"), convex_timeout="4")
        assert settings.get_settings()["db_path"] == Path(tmp_path / "x.db")
        assert settings.get_settings()["convex_timeout"] == 4
        settings.reset()
        assert settings.get_settings()["db_path"] == tmp_path / "env.db"
