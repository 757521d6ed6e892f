"""Structured Logging — one JSON line per relay event for the hosting platform's log drain.

Invariants:
    - Every line names the service and its runtime environment, so logs from
      several deployments of the proxy can share one drain
    - Relay fields (action, upstream_status, error_code) and request fields
      (method, path, status_code, duration_ms) surface only when set
    - setup_logging() owns exactly one root handler, however often it runs

Design Decisions:
    - stdlib logging with a custom formatter, as the rest of the service logs
      through logging.getLogger(__name__)
    - LOG_FORMAT=text keeps local runs readable; the relay action is appended
      to text lines so both formats carry it
"""

import logging
import json
from datetime import datetime, timezone

SERVICE_NAME = "iqc-proxy"
_HANDLER_NAME = "iqc_proxy"

RELAY_FIELDS = ("action", "upstream_status", "error_code")
REQUEST_FIELDS = ("method", "path", "status_code", "duration_ms")


class JSONFormatter(logging.Formatter):
    """Render records as single-line JSON stamped with service and environment."""

    def __init__(self, environment: str = "production"):
        super().__init__()
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.fromtimestamp(
                record.created, timezone.utc,
            ).isoformat(),
            "service": SERVICE_NAME,
            "environment": self.environment,
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in RELAY_FIELDS + REQUEST_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = val
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


class TextFormatter(logging.Formatter):
    """Human-readable lines; appends `[action=...]` for relay records."""

    def __init__(self):
        super().__init__("%(asctime)s %(levelname)s %(name)s: %(message)s")

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        action = record.__dict__.get("action")
        return f"{line} [action={action}]" if action else line


def setup_logging(
    level: str = "INFO", fmt: str = "json", environment: str = "production",
):
    """Install the proxy's root handler, replacing any earlier one."""
    handler = logging.StreamHandler()
    handler.set_name(_HANDLER_NAME)
    if fmt == "json":
        handler.setFormatter(JSONFormatter(environment))
    else:
        handler.setFormatter(TextFormatter())
    for existing in list(logging.root.handlers):
        if existing.get_name() == _HANDLER_NAME:
            logging.root.removeHandler(existing)
    logging.root.addHandler(handler)
    logging.root.setLevel(getattr(logging, level.upper(), logging.INFO))
