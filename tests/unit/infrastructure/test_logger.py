"""
Unit tests for structured logging helpers.

Usage:
    pytest tests/unit/infrastructure/test_logger.py
"""

import json
import logging

from abonnement.infrastructure.monitoring.logger import (
    JSONFormatter,
    get_request_id,
    request_id_ctx,
    set_request_id,
)


def make_record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        name="abonnement.test",
        level=logging.INFO,
        pathname=__file__,
        lineno=10,
        msg="Subscription created",
        args=None,
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestJSONFormatter:
    """Tests for JSONFormatter."""

    def test_base_fields(self):
        token = request_id_ctx.set(None)
        try:
            data = json.loads(JSONFormatter().format(make_record()))
        finally:
            request_id_ctx.reset(token)

        assert data["level"] == "INFO"
        assert data["logger"] == "abonnement.test"
        assert data["message"] == "Subscription created"
        assert "request_id" not in data

    def test_includes_request_id_and_extra(self):
        token = request_id_ctx.set("req-123")
        try:
            data = json.loads(
                JSONFormatter().format(make_record(subscription_id="abc"))
            )
        finally:
            request_id_ctx.reset(token)

        assert data["request_id"] == "req-123"
        assert data["subscription_id"] == "abc"


class TestRequestId:
    """Tests for request ID context helpers."""

    def test_generates_id_when_missing(self):
        token = request_id_ctx.set(None)
        try:
            request_id = set_request_id()
            assert request_id
            assert get_request_id() == request_id
        finally:
            request_id_ctx.reset(token)

    def test_keeps_given_id(self):
        token = request_id_ctx.set(None)
        try:
            assert set_request_id("given") == "given"
            assert get_request_id() == "given"
        finally:
            request_id_ctx.reset(token)
