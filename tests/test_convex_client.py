"""Tests for the Convex HTTP client."""

import pytest
import requests

from spirithub import settings
from spirithub.services import convex_client
from spirithub.services.convex_client import ConvexClientError

from .conftest import FakeResponse, FakeSession

URL = "https://demo.convex.cloud/"


def _ok(value):
    return FakeResponse({"status": "success", "value": value})


class TestConfiguration:
    def test_not_configured(self):
        assert convex_client.is_configured() is False
        with pytest.raises(ConvexClientError, match="CONVEX_URL"):
            convex_client.query("numerology:getDailyNumber")

    def test_reads_environment(self, monkeypatch):
        monkeypatch.setenv("CONVEX_URL", "https://env.convex.cloud")
        monkeypatch.setenv("CONVEX_DEPLOY_KEY", "secret")
        monkeypatch.setenv("CONVEX_TIMEOUT", "3")
        settings.reset()
        assert convex_client.health_check() == {
            "configured": True,
            "url": "https://env.convex.cloud",
            "authenticated": True,
            "timeout": 3,
        }

    def test_configure_overrides(self):
        convex_client.configure(url=URL, timeout=5)
        check = convex_client.health_check()
        assert check["configured"] and check["timeout"] == 5
        assert check["authenticated"] is False


class TestCalls:
    def test_query_payload(self):
        session = FakeSession(default=_ok({"number": 7}))
        convex_client.configure(url=URL, session=session)
        assert convex_client.query("numerology:getDailyNumber", {"date": "2025-11-14"}) == {"number": 7}
        call = session.calls[0]
        assert call["url"] == "https://demo.convex.cloud/api/query"
        assert call["json"] == {"path": "numerology:getDailyNumber", "args": {"date": "2025-11-14"},
                                "format": "json"}
        assert "Authorization" not in call["headers"]
        assert call["timeout"] == 10

    def test_mutation_with_key(self):
        session = FakeSession(default=_ok(None))
        convex_client.configure(url=URL, key="secret", session=session)
        assert convex_client.mutation("analytics:track") is None
        call = session.calls[0]
        assert call["url"].endswith("/api/mutation")
        assert call["json"]["args"] == {}
        assert call["headers"]["Authorization"] == "Convex secret"

    def test_function_error(self):
        convex_client.configure(url=URL, session=FakeSession(
            default=FakeResponse({"status": "error", "errorMessage": "Server Error"})))
        with pytest.raises(ConvexClientError, match="Server Error"):
            convex_client.query("dreams:getDailyDream")

    def test_unknown_status(self):
        convex_client.configure(url=URL, session=FakeSession(default=FakeResponse({"status": "pending"})))
        with pytest.raises(ConvexClientError, match="pending"):
            convex_client.query("dreams:getDailyDream")

    def test_http_error(self):
        convex_client.configure(url=URL, session=FakeSession(default=FakeResponse({}, status_code=500)))
        with pytest.raises(ConvexClientError, match="500"):
            convex_client.query("dreams:getDailyDream")

    def test_network_error(self):
        convex_client.configure(url=URL, session=FakeSession(default=requests.Timeout("timed out")))
        with pytest.raises(ConvexClientError, match="timed out"):
            convex_client.query("dreams:getDailyDream")

    def test_invalid_json(self):
        convex_client.configure(url=URL, session=FakeSession(default=FakeResponse(raw="<html>")))
        with pytest.raises(ConvexClientError, match="invalid"):
            convex_client.query("dreams:getDailyDream")

    def test_non_object_response(self):
        convex_client.configure(url=URL, session=FakeSession(default=FakeResponse([1, 2])))
        with pytest.raises(ConvexClientError):
            convex_client.query("dreams:getDailyDream")
