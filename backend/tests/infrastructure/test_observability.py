"""Structured Logging — verifies service stamping, relay fields and handler ownership."""

import json
import logging

from iqc_proxy.infrastructure.observability import (
    SERVICE_NAME, JSONFormatter, TextFormatter, setup_logging,
)


def _record(**extra) -> logging.LogRecord:
    record = logging.LogRecord(
        "iqc_proxy.test", logging.INFO, __file__, 1, "hello %s", ("world",), None,
    )
    record.__dict__.update(extra)
    return record


def test_json_formatter_stamps_service_and_environment():
    log = json.loads(JSONFormatter("staging").format(_record()))
    assert log["service"] == SERVICE_NAME
    assert log["environment"] == "staging"
    assert log["level"] == "INFO"
    assert log["logger"] == "iqc_proxy.test"
    assert log["message"] == "hello world"
    assert "timestamp" in log


def test_json_formatter_surfaces_relay_fields_only():
    log = json.loads(JSONFormatter().format(
        _record(action="getConfig", upstream_status=503, unrelated="x"),
    ))
    assert log["action"] == "getConfig"
    assert log["upstream_status"] == 503
    assert "unrelated" not in log
    assert "path" not in log


def test_text_formatter_appends_action():
    assert TextFormatter().format(_record(action="api")).endswith("[action=api]")
    assert "[action=" not in TextFormatter().format(_record())


def test_setup_logging_owns_single_handler():
    setup_logging("DEBUG", "text")
    setup_logging("INFO", "json", "staging")
    ours = [h for h in logging.root.handlers if h.get_name() == "iqc_proxy"]
    assert len(ours) == 1
    assert isinstance(ours[0].formatter, JSONFormatter)
    assert ours[0].formatter.environment == "staging"
    assert logging.root.level == logging.INFO
