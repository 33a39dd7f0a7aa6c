"""Shared fixtures."""

import pandas as pd
import pytest
import requests

from spirithub import daily, loaders, settings
from spirithub.services import convex_client
from spirithub.store import ContentStore

SYMBOL_ROWS = [
    ("Șarpe", "sarpe", "animale", "Transformare și vindecare.", "Șarpele vorbește despre schimbare profundă."),
    ("Pisică", "pisica", "animale", "Independență și intuiție.", "Pisica arată latura intuitivă."),
    ("Câine", "caine", "animale", "Loialitate și prietenie.", "Câinele este simbolul prieteniei sincere."),
    ("Apă", "apa", "natura", "Emoții și purificare.", "Apa reflectă starea emoțională."),
    ("Casă", "casa", "obiecte", "Sinele și siguranța.", "Casa din vis te reprezintă pe tine."),
    ("A zbura", "a-zbura", "actiuni", "Libertate și detașare.", "Zborul arată eliberarea de limitări."),
    ("Iubire", "iubire", "emotii", "Conexiune și armonie.", "Visul despre iubire arată nevoia de afecțiune."),
    ("Mamă", "mama", "persoane", "Grijă și protecție.", "Mama simbolizează hrana emoțională."),
    ("Biserică", "biserica", "locuri", "Spiritualitate și credință.", "Biserica reprezintă căutarea liniștii."),
]


@pytest.fixture(autouse=True)
def isolated_runtime(monkeypatch, tmp_path):
    for var in ("CONVEX_URL", "CONVEX_DEPLOY_KEY", "CONVEX_TIMEOUT", "SPIRITHUB_TZ"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("SPIRITHUB_DB_PATH", str(tmp_path / "env.db"))
    settings.reset()
    convex_client.reset()
    daily.clear_widget_cache()
    yield
    settings.reset()
    convex_client.reset()
    daily.clear_widget_cache()
    loaders.clear_cache()


@pytest.fixture
def symbols_df():
    return pd.DataFrame(
        SYMBOL_ROWS,
        columns=["name", "slug", "category", "short_meaning", "full_interpretation"],
    )


@pytest.fixture
def store(tmp_path):
    return ContentStore(tmp_path / "spirithub.db")


class FakeResponse:
    def __init__(self, payload=None, status_code=200, raw=None):
        self.payload = payload
        self.status_code = status_code
        self.raw = raw

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self):
        if self.raw is not None:
            raise ValueError("Expecting value")
        return self.payload


class FakeSession:
    """Records POSTs; `responses` maps a function path to a FakeResponse or an exception."""

    def __init__(self, responses=None, default=None):
        self.responses = responses or {}
        self.default = default
        self.calls = []

    def post(self, url, json=None, headers=None, timeout=None):
        self.calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        result = self.responses.get(json["path"], self.default)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_session():
    return FakeSession
