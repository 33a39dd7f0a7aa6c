"""Tests for error reporting."""

import logging

from spirithub.reporting import capture_exception, capture_message


class TestReporting:
    def test_capture_exception(self, caplog):
        with caplog.at_level(logging.ERROR, logger="spirithub.reporting"):
            capture_exception(ValueError("boom"), {"source": "DailyWidget", "tags": {"page": "home"},
                                                   "extra": {"date": "2025-11-14"}})
        record = caplog.records[-1]
        assert record.levelno == logging.ERROR
        assert record.getMessage() == '[DailyWidget] boom {"date": "2025-11-14"}'
        assert record.source == "DailyWidget"
        assert record.tags == {"page": "home"}
        assert record.exc_info[0] is ValueError

    def test_capture_non_exception(self, caplog):
        with caplog.at_level(logging.ERROR, logger="spirithub.reporting"):
            capture_exception("ceva nu a mers")
        assert caplog.records[-1].getMessage() == "[Unknown] ceva nu a mers"

    def test_capture_message(self, caplog):
        with caplog.at_level(logging.WARNING, logger="spirithub.reporting"):
            capture_message("date lipsă")
        record = caplog.records[-1]
        assert record.levelno == logging.WARNING
        assert record.getMessage() == "[App] date lipsă"
