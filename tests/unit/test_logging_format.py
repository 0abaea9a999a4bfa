"""Tests for unified logging format.

Target format: 2026-01-06T14:05:52Z [source] LEVEL message
"""

from __future__ import annotations

import logging
import re
import sys
from datetime import datetime
from unittest.mock import patch

import pytest

from grouping.logging_config import TRACE, HealthCheckFilter, ISO8601Formatter, configure_logging


def make_record(msg: str, level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(name="test", level=level, pathname="", lineno=0, msg=msg, args=(), exc_info=None)


@pytest.fixture
def restore_root_logger():
    """configure_logging replaces root handlers; put them back afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestISO8601Formatter:
    def test_format_matches_target_layout(self):
        output = ISO8601Formatter(source="cli").format(make_record("Built 3 groups"))
        pattern = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z \[cli\] INFO Built 3 groups$"
        assert re.match(pattern, output), f"Output '{output}' doesn't match expected format"

    def test_timestamp_is_utc(self):
        timestamp_str = ISO8601Formatter(source="api").format(make_record("Test")).split(" ")[0]
        assert timestamp_str.endswith("Z")
        assert datetime.fromisoformat(timestamp_str.replace("Z", "+00:00")) is not None

    def test_trace_level_name(self):
        output = ISO8601Formatter().format(make_record("scan", level=TRACE))
        assert "[grouping] TRACE scan" in output

    def test_exception_text_appended(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = logging.LogRecord("test", logging.ERROR, "", 0, "failed", (), sys.exc_info())
        output = ISO8601Formatter().format(record)
        assert "failed\nTraceback" in output
        assert "ValueError: boom" in output


class TestHealthCheckFilter:
    def test_suppresses_health_access_logs(self):
        record = make_record('127.0.0.1 - "GET /health HTTP/1.1" 200')
        assert HealthCheckFilter().filter(record) is False

    def test_keeps_other_requests(self):
        record = make_record('127.0.0.1 - "POST /api/groups HTTP/1.1" 200')
        assert HealthCheckFilter().filter(record) is True

    def test_keeps_health_at_debug(self):
        record = make_record('"GET /health HTTP/1.1" 200', level=logging.DEBUG)
        assert HealthCheckFilter().filter(record) is True


@pytest.mark.usefixtures("restore_root_logger")
class TestConfigureLogging:
    def test_level_from_env(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "trace"}):
            root = configure_logging(source="test")
        assert root.level == TRACE

    def test_debug_flag(self):
        with patch.dict("os.environ", {"LOG_LEVEL": ""}):
            root = configure_logging(source="test", debug=True)
        assert root.level == logging.DEBUG

    def test_explicit_level_wins(self):
        with patch.dict("os.environ", {"LOG_LEVEL": "DEBUG"}):
            root = configure_logging(source="test", level=logging.ERROR)
        assert root.level == logging.ERROR

    def test_single_handler(self):
        configure_logging(source="test")
        root = configure_logging(source="test")
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0].formatter, ISO8601Formatter)

    def test_trace_records_pass_at_trace_level(self, capsys):
        with patch.dict("os.environ", {"LOG_LEVEL": "TRACE"}):
            configure_logging(source="test")
        logging.getLogger("grouping.graph.closure").log(TRACE, "Closure of A: 1 members")
        assert "[test] TRACE Closure of A: 1 members" in capsys.readouterr().out
