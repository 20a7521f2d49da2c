"""
Unit tests for the JSON-line log formatter.
"""

import json
import logging
import sys

from mashery_auth.log import JsonLineFormatter, get_logger


def make_record(msg, args=(), exc_info=None):
    return logging.LogRecord(
        name="mashery_auth.core.v3_manager",
        level=logging.ERROR,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=args,
        exc_info=exc_info,
    )


def test_message_with_quotes_is_valid_json():
    """Test quotes and backslashes in a message are escaped."""
    record = make_record('upstream said "invalid_grant" at %s', ("C:\\token",))

    entry = json.loads(JsonLineFormatter().format(record))

    assert entry["msg"] == 'upstream said "invalid_grant" at C:\\token'
    assert entry["level"] == "ERROR"
    assert entry["name"] == "mashery_auth.core.v3_manager"
    assert entry["ts"].endswith("Z")


def test_multiline_message_stays_one_line():
    """Test a message with newlines renders as a single line."""
    line = JsonLineFormatter().format(make_record("first\nsecond"))

    assert "\n" not in line
    assert json.loads(line)["msg"] == "first\nsecond"


def test_exception_included():
    """Test exception info lands in the exc field."""
    try:
        raise ConnectionError("socket reset")
    except ConnectionError:
        record = make_record("exchange failed", exc_info=sys.exc_info())

    entry = json.loads(JsonLineFormatter().format(record))

    assert "ConnectionError: socket reset" in entry["exc"]


def test_get_logger_idempotent():
    """Test repeated setup adds a single JSON-line handler."""
    logger = get_logger("mashery_auth.test_log")
    get_logger("mashery_auth.test_log")

    assert len(logger.handlers) == 1
    assert isinstance(logger.handlers[0].formatter, JsonLineFormatter)
