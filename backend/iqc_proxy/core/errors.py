"""Error Hierarchy — typed, categorized exceptions for every relay failure mode.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - All relay failures are 500-level: the caller cannot fix an upstream fault
    - to_response() produces the {success: false, error, details} envelope
    - `details` carries the underlying message, never a stack trace

Design Decisions:
    - Single hierarchy with ProxyError base: one global handler catches all
      (ADR: uniform error shape across both relay routes)
    - The domain message ("Failed to fetch config") belongs to the action, not
      the error; the same UpstreamStatusError is raised for every route and
      the relay attaches its action via ErrorContext
"""

from dataclasses import dataclass
from enum import Enum

from iqc_proxy.core.domain_types import RelayAction

DEFAULT_FAILURE_MESSAGE = "Request failed"


class ErrorSeverity(str, Enum):
    """Error severity for observability."""
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    CONFIGURATION = "configuration"
    EXTERNAL_API = "external_api"
    TIMEOUT = "timeout"


@dataclass
class ErrorContext:
    """Where the error happened, filled in by the relay that caught it."""
    action: RelayAction | None = None
    upstream_status: int | None = None


class ProxyError(Exception):
    """Base exception for all relay errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    @property
    def error_message(self) -> str:
        """Domain message for the envelope's `error` field."""
        if self.context.action is None:
            return DEFAULT_FAILURE_MESSAGE
        return self.context.action.failure_message

    def to_response(self) -> dict:
        """Convert to the relay failure envelope."""
        return {
            "success": False,
            "error": self.error_message,
            "details": self.message,
        }


class ConfigurationError(ProxyError):
    """A required setting is missing or blank."""
    def __init__(self, setting: str):
        super().__init__(
            f"{setting} not configured",
            "CONFIGURATION_ERROR", ErrorCategory.CONFIGURATION,
            ErrorSeverity.CRITICAL, http_status=500,
        )
        self.setting = setting


class UpstreamStatusError(ProxyError):
    """Upstream answered with a non-2xx status."""
    def __init__(self, status_code: int):
        super().__init__(
            f"Upstream error: {status_code}",
            "UPSTREAM_STATUS_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, ErrorContext(upstream_status=status_code), 500,
        )
        self.status_code = status_code


class UpstreamTimeoutError(ProxyError):
    """Upstream did not answer within the configured bound."""
    def __init__(self, timeout_seconds: float):
        super().__init__(
            f"Upstream timeout after {timeout_seconds:g}s",
            "UPSTREAM_TIMEOUT", ErrorCategory.TIMEOUT,
            ErrorSeverity.ERROR, http_status=500,
        )
        self.timeout_seconds = timeout_seconds


class UpstreamTransportError(ProxyError):
    """Connection or protocol failure talking to upstream."""
    def __init__(self, message: str):
        super().__init__(
            f"Upstream request failed: {message}",
            "UPSTREAM_TRANSPORT_ERROR", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, http_status=500,
        )


class UpstreamPayloadError(ProxyError):
    """Upstream body is not valid JSON."""
    def __init__(self, message: str):
        super().__init__(
            f"Invalid JSON from upstream: {message}",
            "UPSTREAM_INVALID_JSON", ErrorCategory.EXTERNAL_API,
            ErrorSeverity.ERROR, http_status=500,
        )
