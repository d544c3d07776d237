"""
Unit tests for logging setup.

Covered:
- json format emits one parseable object per record, quotes and tracebacks included
- console format stays a plain text line
"""

import json
import logging
import sys

import pytest

from liftlog.core.log_config import CONSOLE_FORMAT, JsonFormatter, configure_logging

pytestmark = pytest.mark.unit


def make_record(msg, *args, exc_info=None) -> logging.LogRecord:
    return logging.LogRecord("liftlog.services.workout_service", logging.ERROR, __file__, 1, msg, args, exc_info)


def test_json_formatter_escapes_message():
    line = JsonFormatter().format(make_record('workout "%s" failed', "Leg day"))
    entry = json.loads(line)
    assert entry["message"] == 'workout "Leg day" failed'
    assert entry["level"] == "ERROR"
    assert entry["logger"] == "liftlog.services.workout_service"
    assert "\n" not in line


def test_json_formatter_keeps_traceback_inside_object():
    try:
        raise ValueError("bad set")
    except ValueError:
        record = make_record("update_workout failed", exc_info=sys.exc_info())
    entry = json.loads(JsonFormatter().format(record))
    assert "ValueError: bad set" in entry["exc_info"]


@pytest.mark.parametrize(
    "log_format, formatter_type",
    [("json", JsonFormatter), ("console", logging.Formatter)],
)
def test_configure_logging_picks_formatter(settings, log_format, formatter_type):
    configure_logging(settings.model_copy(update={"log_format": log_format}))
    [handler] = logging.getLogger("liftlog").handlers
    assert type(handler.formatter) is formatter_type
    if log_format == "console":
        assert handler.formatter._fmt == CONSOLE_FORMAT
