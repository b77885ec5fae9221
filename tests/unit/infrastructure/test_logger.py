"""
Unit tests for logging setup and JSON formatting.

Usage:
    pytest tests/unit/infrastructure/test_logger.py
"""

import json
import logging

from virement.infrastructure.monitoring import get_request_id, set_request_id
from virement.infrastructure.monitoring.logger import JSONFormatter


def _record(message: str, **extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="virement.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg=message,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Test JSONFormatter output."""

    def test_basic_fields(self):
        """Test record is rendered as JSON with core fields."""
        set_request_id("req-123")

        payload = json.loads(JSONFormatter().format(_record("hello")))

        assert payload["message"] == "hello"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "virement.test"
        assert payload["request_id"] == "req-123"

    def test_extra_fields_included(self):
        """Test non-reserved record attributes are emitted."""
        payload = json.loads(
            JSONFormatter().format(_record("transfer", lamports=42))
        )

        assert payload["lamports"] == 42


class TestRequestId:
    """Test request id context helpers."""

    def test_explicit_id(self):
        """Test explicit request id is kept."""
        assert set_request_id("abc") == "abc"
        assert get_request_id() == "abc"

    def test_generated_id(self):
        """Test missing id is generated."""
        request_id = set_request_id(None)

        assert request_id
        assert get_request_id() == request_id
