"""Tests for structured logging setup."""

import json
import logging

import structlog

from hooksign.common.logging import get_logger, setup_logging


def test_json_logs_are_key_value(caplog):
    """JSON mode renders events with their bound fields."""
    caplog.set_level(logging.INFO)
    setup_logging(level="INFO", json_logs=True)
    try:
        get_logger("hooksign.test").info("Webhook signature rejected", reason="Invalid timestamp")
        event = json.loads(caplog.records[-1].getMessage())
        assert event["event"] == "Webhook signature rejected"
        assert event["reason"] == "Invalid timestamp"
        assert event["level"] == "info"
        assert event["logger"] == "hooksign.test"
    finally:
        structlog.reset_defaults()


def test_level_filters_debug(caplog):
    """Debug events are dropped at INFO level."""
    caplog.set_level(logging.DEBUG)
    setup_logging(level="INFO", json_logs=True)
    try:
        get_logger("hooksign.test").debug("Signature comparison failed")
        assert all(
            "Signature comparison failed" not in record.getMessage() for record in caplog.records
        )
    finally:
        structlog.reset_defaults()
