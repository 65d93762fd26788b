from __future__ import annotations

import json
import logging

from stationreg.runtime import JSONFormatter, setup_logging


def test_json_formatter_includes_extra_fields() -> None:
    record = logging.LogRecord(
        name="stationreg.runtime.script",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg="Command failed: %s",
        args=("Unknown station: 9",),
        exc_info=None,
    )
    record.line_number = 3

    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["logger"] == "stationreg.runtime.script"
    assert data["message"] == "Command failed: Unknown station: 9"
    assert data["line_number"] == 3
    assert "station_id" not in data


def test_setup_logging_installs_single_handler() -> None:
    before = list(logging.root.handlers)
    level = logging.root.level
    handler = setup_logging("debug", "json")
    try:
        assert handler in logging.root.handlers
        assert len(logging.root.handlers) == len(before) + 1
        assert isinstance(handler.formatter, JSONFormatter)
        assert logging.root.level == logging.DEBUG
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(level)


def test_json_timestamp_comes_from_record() -> None:
    record = logging.LogRecord("stationreg", logging.WARNING, __file__, 1, "full", None, None)
    record.created = 0.0

    data = json.loads(JSONFormatter().format(record))

    assert data["timestamp"] == "1970-01-01T00:00:00+00:00"


def test_setup_logging_unknown_level_falls_back_to_warning() -> None:
    level = logging.root.level
    handler = setup_logging("chatty")
    try:
        assert logging.root.level == logging.WARNING
        assert not isinstance(handler.formatter, JSONFormatter)
    finally:
        logging.root.removeHandler(handler)
        logging.root.setLevel(level)
